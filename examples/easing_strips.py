"""Render one horizontal strip per easing curve into a single PNG.

Run directly with:
    python examples/easing_strips.py [output.png]
"""
import sys

from PIL import Image, ImageDraw

from smoothgradient import EasingType, SmoothGradient, UnitPoint, to_uint8

STRIP_WIDTH = 512
STRIP_HEIGHT = 48
LABEL_WIDTH = 140


def render_strips() -> Image.Image:
    easings = list(EasingType)
    canvas = Image.new("RGBA", (LABEL_WIDTH + STRIP_WIDTH, STRIP_HEIGHT * len(easings)), (255, 255, 255, 255))
    draw = ImageDraw.Draw(canvas)

    for row, easing in enumerate(easings):
        gradient = SmoothGradient.from_colors(
            ["#1d2b53", "#ff004d", "#ffec27"],
            start_point=UnitPoint.leading,
            end_point=UnitPoint.trailing,
            smooth_type=easing,
            subdivisions=32,
        )
        strip = to_uint8(gradient.render(STRIP_WIDTH, STRIP_HEIGHT))
        canvas.paste(Image.fromarray(strip), (LABEL_WIDTH, row * STRIP_HEIGHT))
        draw.text((8, row * STRIP_HEIGHT + STRIP_HEIGHT // 2 - 6), easing.value, fill=(0, 0, 0, 255))

    return canvas


if __name__ == "__main__":
    output = sys.argv[1] if len(sys.argv) > 1 else "easing_strips.png"
    render_strips().save(output)
    print(f"Saved {output}")
