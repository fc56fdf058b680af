"""Basic swatchlab usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from swatchlab import (
    HexColor,
    RGBColor,
    convert_color,
    color_to_css,
    check_contrast,
    format_contrast_ratio,
    generate_contrast_scorecard,
    generate_triadic,
    generate_palette_with_variations,
    simulate_color_blindness,
    create_export,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert between spaces.
    accent = HexColor("#ff8040")
    print("Hex -> RGB:", convert_color(accent, "rgb"))
    print("Hex -> HSL:", convert_color(accent, "hsl"))
    print("Hex -> OKLCH:", color_to_css(convert_color(accent, "oklch")))

    gray = RGBColor(128, 128, 128)
    print("Gray has no hue:", convert_color(gray, "oklch").h is None)


def demonstrate_contrast() -> None:
    background = HexColor("#777777")
    result = check_contrast(RGBColor(255, 255, 255), background)
    print("White on #777:", format_contrast_ratio(result.ratio), result.level.value)

    card = generate_contrast_scorecard(background)
    for line in card.recommendations:
        print("  -", line)


def demonstrate_palettes() -> None:
    base = RGBColor(51, 102, 204)
    triad = generate_triadic(base)
    print("Triadic:", [color_to_css(c) for c in triad])

    shades = generate_palette_with_variations(base, "complementary", variations=1)
    print("Complementary with shades:", len(shades), "colors")

    print("Protanopia preview:", [simulate_color_blindness(c, "protanopia") for c in triad])

    artifact = create_export("css", triad.colors, "brand")
    print(artifact.filename, artifact.mime_type)
    print(artifact.content)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_contrast()
    demonstrate_palettes()
