from .num_utils import round_half_up, np_round_half_up

__all__ = ["round_half_up", "np_round_half_up"]
