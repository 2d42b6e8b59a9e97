"""Basic rgbacolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rgbacolor import (
    RgbaColor,
    ColorParser,
    DefaultColor,
    SplitPartsExtractor,
    Notation,
    opacity_properties,
)


def demonstrate_colors() -> None:
    # Construct colors and read HSL components.
    accent = RgbaColor(255, 128, 64, 0.8)
    print("Accent:", accent.to_rgba(), accent.to_hsla())
    print("HSL triple:", accent.to_hsl_triple())

    # Out-of-range components are clamped.
    print("Clamped:", RgbaColor(-10, 300, 128, 1.5).value)


def demonstrate_transforms() -> None:
    base = RgbaColor.parse("#336699")
    print("Lighter:", base.lighten(20).to_hex())
    print("Complement:", base.complement().to_hex())
    print("Grayscale:", base.grayscale().to_hex())

    # Darken, unless that would run out of range: then lighten.
    print("Contrast:", RgbaColor(10, 10, 10).darken_or_lighten(20, 40).to_hsl())

    palette = base.get_palette_vary_lightness(5)
    print("Palette:", [c.format(Notation.HEX) for c in palette])


def demonstrate_parsing() -> None:
    parser = ColorParser(SplitPartsExtractor(), default=DefaultColor.WHITE)
    print("Parsed:", parser.parse("hsla(210, 50%, 40%, 0.5)").to_rgba())
    print("Fallback:", parser.parse("not a color").to_hex())
    print("Opacity:", opacity_properties(0.4, legacy_ie=True))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_transforms()
    demonstrate_parsing()
