#!/usr/bin/env python3
"""
Generate placeholder images for examples/overlay/config.yaml.

Draws a dark background with two pads and one translucent marker sprite per
config entry, so the visualizer can be tried without any artwork.
"""

from pathlib import Path

from PIL import Image, ImageDraw

OUT_DIR = Path(__file__).parent / "overlay"
WIDTH, HEIGHT = 320, 160

# file name -> (marker box, color)
SPRITES = {
    "left_idle.png": ((70, 70, 90, 90), (128, 128, 128, 255)),
    "left_up.png": ((70, 40, 90, 60), (255, 64, 64, 255)),
    "left_up_right.png": ((100, 40, 120, 60), (255, 160, 64, 255)),
    "left_right.png": ((100, 70, 120, 90), (255, 255, 64, 255)),
    "right_rest.png": ((220, 70, 240, 90), (128, 128, 128, 255)),
    "right_a.png": ((220, 100, 240, 120), (64, 255, 64, 255)),
    "right_b.png": ((250, 70, 270, 90), (64, 128, 255, 255)),
}


def main():
    OUT_DIR.mkdir(parents=True, exist_ok=True)

    background = Image.new("RGBA", (WIDTH, HEIGHT), (16, 16, 24, 255))
    draw = ImageDraw.Draw(background)
    draw.ellipse((40, 20, 150, 140), outline=(200, 200, 200, 255), width=3)
    draw.ellipse((190, 20, 300, 140), outline=(200, 200, 200, 255), width=3)
    background.save(OUT_DIR / "background.png")

    for name, (box, color) in SPRITES.items():
        sprite = Image.new("RGBA", (WIDTH, HEIGHT), (0, 0, 0, 0))
        ImageDraw.Draw(sprite).rectangle(box, fill=color)
        sprite.save(OUT_DIR / name)

    print(f"Wrote {len(SPRITES) + 1} images to {OUT_DIR}")


if __name__ == "__main__":
    main()
