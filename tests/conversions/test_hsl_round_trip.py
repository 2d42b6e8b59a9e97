import numpy as np
import pytest
from rgbacolor.conversions import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from tests.samples import rgb_grid, samples_hsl_rgb


def test_round_trip_rgb_hsl():
    for rgb in rgb_grid:
        assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb

def test_round_trip_every_grey():
    for v in range(256):
        assert hsl_to_rgb(*rgb_to_hsl(v, v, v)) == (v, v, v)

def test_np_rgb_to_hsl_matches_scalar():
    the_matrix = np.array(rgb_grid)
    expected = np.array([rgb_to_hsl(*rgb) for rgb in rgb_grid])
    result = np_rgb_to_hsl(the_matrix)
    assert result.shape == the_matrix.shape
    assert np.allclose(result, expected, atol=1e-9)

def test_np_hsl_to_rgb_matches_scalar():
    hsl = np.array(list(samples_hsl_rgb.keys()), dtype=float)
    expected = np.array(list(samples_hsl_rgb.values()))
    assert np.array_equal(np_hsl_to_rgb(hsl), expected)

def test_round_trip_rgb_hsl_numpy():
    the_matrix = np.array(rgb_grid).reshape(18, 18, 18, 3)
    rgb = np_hsl_to_rgb(np_rgb_to_hsl(the_matrix))
    assert rgb.shape == the_matrix.shape
    assert np.array_equal(rgb, the_matrix)

def test_np_hsl_to_rgb_normalizes_inputs():
    hsl = np.array([[360.0, 100.0, 50.0], [-120.0, 100.0, 50.0], [0.0, 150.0, 50.0]])
    assert np.array_equal(np_hsl_to_rgb(hsl), [[255, 0, 0], [0, 0, 255], [255, 0, 0]])

def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        np_rgb_to_hsl(np.zeros((4, 4)))
    with pytest.raises(ValueError):
        np_hsl_to_rgb(np.zeros((2, 3, 2)))
