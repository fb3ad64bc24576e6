"""The panel used to edit the six colours of a theme palette."""

from __future__ import annotations

from typing import Optional

from .materialform import _channel
from .model import Color, ColorPalette, GuiResult, InputState, Key, Rect, TextBox
from .objectform import _cycle_focus
from .widgets import Button, make_button

PALETTE_FIELDS = ("white", "black", "light", "dark", "accent1", "accent2")
PALETTE_LABELS = ("White", "Black", "Light", "Dark", "Accent 1", "Accent 2")
_CHANNEL_PLACEHOLDERS = ("R", "G", "B")


class ColorForm:
    """Eighteen channel boxes (R, G, B for each palette colour) and four buttons."""

    def __init__(self, theme: ColorPalette, width: float, height: float) -> None:
        self.theme = theme
        self.width = width
        self.height = height
        self.pos = (width * 0.7, height * 0.05)
        self.companion: Optional[ColorPalette] = None
        px, py = self.pos

        rows = []
        for row in range(len(PALETTE_FIELDS)):
            boxes = tuple(
                TextBox(
                    text=placeholder,
                    rect=Rect(
                        px + width * 0.005 + col * width * 0.085,
                        py + height * 0.05 + row * height * 0.1,
                        width * 0.08,
                        height * 0.05,
                    ),
                    char_count=4,
                    text_index=0,
                )
                for col, placeholder in enumerate(_CHANNEL_PLACEHOLDERS)
            )
            rows.append(boxes)
        self.rows = tuple(rows)
        self.boxes = tuple(box for row in self.rows for box in row)

        def button(x, y, text, color) -> Button:
            rect = Rect(px + width * x, py + height * y, width * 0.1225, height * 0.08)
            return make_button(rect, text, color, theme)

        self.cancel_button = button(0.005, 0.625, "Cancel", theme.black)
        self.save_button = button(0.1325, 0.625, "Save", theme.accent1)
        self.delete_button = button(0.005, 0.71, "Delete", theme.dark)
        self.select_button = button(0.1325, 0.71, "Select", theme.dark)

    def update(self, inputs: InputState) -> GuiResult:
        """Process one frame of input and report what the form asks for."""
        focus = _cycle_focus(self.boxes, inputs)
        if focus is not None:
            return focus
        if self.save_button.poll(inputs) or inputs.chord(Key.S):
            return GuiResult.SAVE
        if self.cancel_button.poll(inputs) or inputs.chord(Key.A):
            return GuiResult.CANCEL
        if self.delete_button.poll(inputs) or inputs.chord(Key.D):
            return GuiResult.DELETE
        if self.select_button.poll(inputs):
            return GuiResult.CHANGE_THEME
        return GuiResult.NOTHING

    def to_palette(self) -> ColorPalette:
        """Read the boxes into a palette, store it as the form's palette and return it.

        Unreadable channels become 0, channels wrap to 8 bits and every alpha is 255.
        """
        colors = {
            name: Color(*(_channel(box) for box in row), 255)
            for name, row in zip(PALETTE_FIELDS, self.rows)
        }
        self.companion = ColorPalette(**colors)
        return self.companion

    def load_palette(self, palette: ColorPalette) -> None:
        """Make ``palette`` the form's palette and show its channels."""
        self.companion = palette
        for name, row in zip(PALETTE_FIELDS, self.rows):
            color: Color = getattr(palette, name)
            for box, value in zip(row, (color.r, color.g, color.b)):
                box.set_text(str(value))