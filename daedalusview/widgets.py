"""Push buttons and fixed-width text wrapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .model import Color, ColorPalette, InputState, Rect, SPACING

CHAR_PER_LINE = 30
PRESS_DARKEN = 0.8
PRESS_TEXT_DARKEN = 0.75


@dataclass(frozen=True)
class TextLayout:
    """Where and how large a button's caption is drawn."""

    size: int
    spacing: int
    x: float
    y: float


def _int_spacing(size: int) -> int:
    return 1 if size < SPACING else size // SPACING


@dataclass
class Button:
    """A clickable button; toggle buttons stay pressed until clicked again."""

    text: str
    rect: Rect
    color: Color
    text_color: Color
    is_selected: bool = False
    is_pressed: bool = False
    is_toggle: bool = False

    def press(self) -> None:
        self.color = self.color.scaled(PRESS_DARKEN)
        self.text_color = self.text_color.scaled(PRESS_TEXT_DARKEN)
        self.is_pressed = True

    def release(self) -> None:
        self.color = self.color.scaled(1.25)
        self.text_color = self.text_color.scaled(4 / 3)
        self.is_pressed = False

    @property
    def draw_rect(self) -> Rect:
        """The rectangle drawn this frame: shrunk while a momentary button is held."""
        r = self.rect
        if self.is_pressed and not self.is_toggle:
            return Rect(r.x + 0.05 * r.width, r.y + 0.05 * r.height, r.width * 0.9, r.height * 0.9)
        return r

    def poll(self, inputs: InputState) -> bool:
        """Update hover/press state from ``inputs``; True when the button fires."""
        if self.rect.contains(*inputs.mouse):
            self.is_selected = True
            if inputs.mouse_pressed:
                if self.is_toggle and self.is_pressed:
                    self.release()
                    return True
                self.press()
                if self.is_toggle:
                    return True
        else:
            self.is_selected = False
        if inputs.mouse_released and self.is_pressed and not self.is_toggle:
            self.release()
            return self.is_selected
        return False

    def fit_text(self, measure: Callable[[str, int, int], tuple]) -> TextLayout:
        """Shrink the caption until it fits the button, then centre it.

        ``measure(text, size, spacing)`` returns the caption's (width, height).
        """
        r = self.draw_rect
        size = int(r.height)
        spacing = _int_spacing(size)
        width, height = measure(self.text, size, spacing)
        while (width + r.width / 10 > r.width or height + r.height / 10 > r.height) and size > 0:
            size -= 2
            spacing = _int_spacing(size)
            width, height = measure(self.text, size, spacing)
        return TextLayout(
            size=size,
            spacing=spacing,
            x=r.x + (r.width - width) / 2,
            y=height / 20 + r.y + (r.height - height) / 2,
        )


def make_button(rect: Rect, text: str, color: Color, theme: ColorPalette) -> Button:
    """Create a button whose caption contrasts with its fill colour."""
    text_color = theme.black if color.r == theme.white.r else theme.white
    return Button(text=text, rect=rect, color=color, text_color=text_color)


def wrap_text(text: str, row_count: int) -> list[str]:
    """Break ``text`` into the rows drawn in a text panel of ``row_count`` rows.

    A row ends at a newline or after 31 characters; the character that ends a
    row is consumed, and no more than ``row_count`` rows are produced.
    """
    lines: list[str] = []
    start, length = 0, len(text)
    while start < length:
        end = start
        while end < length and end - start <= CHAR_PER_LINE and text[end] != "\n":
            end += 1
        lines.append(text[start:end])
        if len(lines) == row_count:
            break
        start = end + 1
    return lines