"""
Text renderer - bitmap text and rectangles on a numpy framebuffer.
Used for the binding wizard's prompts on the overlay layer.
"""

from typing import Sequence

import numpy as np


# Simple 5x7 bitmap font
# Each character is 5 pixels wide, 7 pixels tall
# Stored as a dictionary of character -> list of 7 integers (each int represents a row)
FONT_5X7 = {
    ' ': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000],
    'A': [0b01110, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001],
    'B': [0b11110, 0b10001, 0b10001, 0b11110, 0b10001, 0b10001, 0b11110],
    'C': [0b01110, 0b10001, 0b10000, 0b10000, 0b10000, 0b10001, 0b01110],
    'D': [0b11110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b11110],
    'E': [0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b11111],
    'F': [0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b10000],
    'G': [0b01110, 0b10001, 0b10000, 0b10111, 0b10001, 0b10001, 0b01110],
    'H': [0b10001, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001],
    'I': [0b01110, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110],
    'J': [0b00111, 0b00010, 0b00010, 0b00010, 0b00010, 0b10010, 0b01100],
    'K': [0b10001, 0b10010, 0b10100, 0b11000, 0b10100, 0b10010, 0b10001],
    'L': [0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b11111],
    'M': [0b10001, 0b11011, 0b10101, 0b10101, 0b10001, 0b10001, 0b10001],
    'N': [0b10001, 0b11001, 0b10101, 0b10011, 0b10001, 0b10001, 0b10001],
    'O': [0b01110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110],
    'P': [0b11110, 0b10001, 0b10001, 0b11110, 0b10000, 0b10000, 0b10000],
    'Q': [0b01110, 0b10001, 0b10001, 0b10001, 0b10101, 0b10010, 0b01101],
    'R': [0b11110, 0b10001, 0b10001, 0b11110, 0b10100, 0b10010, 0b10001],
    'S': [0b01111, 0b10000, 0b10000, 0b01110, 0b00001, 0b00001, 0b11110],
    'T': [0b11111, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100],
    'U': [0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110],
    'V': [0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01010, 0b00100],
    'W': [0b10001, 0b10001, 0b10001, 0b10101, 0b10101, 0b11011, 0b10001],
    'X': [0b10001, 0b10001, 0b01010, 0b00100, 0b01010, 0b10001, 0b10001],
    'Y': [0b10001, 0b10001, 0b01010, 0b00100, 0b00100, 0b00100, 0b00100],
    'Z': [0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b11111],
    '0': [0b01110, 0b10001, 0b10011, 0b10101, 0b11001, 0b10001, 0b01110],
    '1': [0b00100, 0b01100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110],
    '2': [0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b01000, 0b11111],
    '3': [0b11111, 0b00010, 0b00100, 0b00010, 0b00001, 0b10001, 0b01110],
    '4': [0b00010, 0b00110, 0b01010, 0b10010, 0b11111, 0b00010, 0b00010],
    '5': [0b11111, 0b10000, 0b11110, 0b00001, 0b00001, 0b10001, 0b01110],
    '6': [0b00110, 0b01000, 0b10000, 0b11110, 0b10001, 0b10001, 0b01110],
    '7': [0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b01000, 0b01000],
    '8': [0b01110, 0b10001, 0b10001, 0b01110, 0b10001, 0b10001, 0b01110],
    '9': [0b01110, 0b10001, 0b10001, 0b01111, 0b00001, 0b00010, 0b01100],
    '-': [0b00000, 0b00000, 0b00000, 0b11111, 0b00000, 0b00000, 0b00000],
    ':': [0b00000, 0b00100, 0b00000, 0b00000, 0b00000, 0b00100, 0b00000],
    '/': [0b00000, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b00000],
    '>': [0b01000, 0b00100, 0b00010, 0b00001, 0b00010, 0b00100, 0b01000],
    '.': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00100],
    '#': [0b01010, 0b11111, 0b01010, 0b01010, 0b11111, 0b01010, 0b00000],
    '^': [0b00100, 0b01010, 0b10001, 0b00000, 0b00000, 0b00000, 0b00000],
    '<': [0b00010, 0b00100, 0b01000, 0b10000, 0b01000, 0b00100, 0b00010],
    '*': [0b00000, 0b00100, 0b10101, 0b01110, 0b10101, 0b00100, 0b00000],
    ',': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00100, 0b01000],
    '(': [0b00010, 0b00100, 0b01000, 0b01000, 0b01000, 0b00100, 0b00010],
    ')': [0b01000, 0b00100, 0b00010, 0b00010, 0b00010, 0b00100, 0b01000],
    '[': [0b01110, 0b01000, 0b01000, 0b01000, 0b01000, 0b01000, 0b01110],
    ']': [0b01110, 0b00010, 0b00010, 0b00010, 0b00010, 0b00010, 0b01110],
    '_': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b11111],
    '+': [0b00000, 0b00100, 0b00100, 0b11111, 0b00100, 0b00100, 0b00000],
    '!': [0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00000, 0b00100],
    '?': [0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b00000, 0b00100],
    "'": [0b00100, 0b00100, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000],
}

CHAR_WIDTH = 6  # 5 pixels + 1 spacing
LINE_HEIGHT = 9  # 7 pixels + 2 spacing


class TextRenderer:
    """Renders text and boxes to a numpy framebuffer."""

    def __init__(self, framebuffer: np.ndarray):
        """
        Initialize text renderer.

        Args:
            framebuffer: numpy array of shape (height, width, 3), dtype=uint8
        """
        self.framebuffer = framebuffer
        self.height, self.width = framebuffer.shape[:2]

    def clear(self, color=(0, 0, 0)):
        """Clear the framebuffer to a solid color."""
        self.framebuffer[:, :] = color

    def draw_rect(self, x, y, width, height, color):
        """
        Draw a filled rectangle, clipped to the framebuffer.

        Args:
            x, y: Top-left corner
            width, height: Dimensions
            color: RGB tuple (0-255)
        """
        x1, y1 = max(0, x), max(0, y)
        x2, y2 = min(self.width, x + width), min(self.height, y + height)
        if x1 < x2 and y1 < y2:
            self.framebuffer[y1:y2, x1:x2] = color

    def draw_char(self, char, x, y, color=(255, 255, 255), scale=1):
        """
        Draw a single character using bitmap font.

        Args:
            char: Character to draw (unknown characters draw as a space)
            x, y: Top-left position
            color: RGB tuple (0-255)
            scale: Scaling factor (1 = 5x7 pixels)

        Returns:
            Width of the drawn character
        """
        char = char.upper()
        if char not in FONT_5X7:
            char = ' '

        bitmap = FONT_5X7[char]

        for row_idx, row_data in enumerate(bitmap):
            for col_idx in range(5):
                if row_data & (1 << (4 - col_idx)):  # Check if pixel is set
                    px = x + col_idx * scale
                    py = y + row_idx * scale
                    self.draw_rect(px, py, scale, scale, color)

        return CHAR_WIDTH * scale

    def text_width(self, text, scale=1):
        """Width in pixels of text at the given scale."""
        return len(text) * CHAR_WIDTH * scale

    def draw_text(self, text, x, y, color=(255, 255, 255), scale=1):
        """
        Draw text string.

        Args:
            text: String to draw
            x, y: Top-left position
            color: RGB tuple (0-255)
            scale: Scaling factor

        Returns:
            Total width of drawn text
        """
        cursor_x = x
        for char in text:
            cursor_x += self.draw_char(char, cursor_x, y, color, scale)

        return cursor_x - x

    def draw_panel(self, lines: Sequence[str], y=0, color=(255, 255, 255),
                   background=(24, 24, 24), scale=1, padding=2):
        """
        Draw lines of text on a full-width backdrop.

        Text that does not fit the width is cut at the right edge.

        Returns:
            Height of the panel in pixels
        """
        line_height = LINE_HEIGHT * scale
        panel_height = len(lines) * line_height + 2 * padding
        self.draw_rect(0, y, self.width, panel_height, background)

        max_chars = max(0, (self.width - 2 * padding) // (CHAR_WIDTH * scale))
        for i, line in enumerate(lines):
            self.draw_text(line[:max_chars], padding, y + padding + i * line_height, color, scale)

        return panel_height
