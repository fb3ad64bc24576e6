"""The panel used to create and edit materials."""

from __future__ import annotations

from typing import List, Optional

from .model import Color, ColorPalette, GuiResult, InputState, Key, Material, Rect, TextBox
from .objectform import _cycle_focus, _leading_float, _leading_int
from .widgets import Button, make_button

_DEFAULTS = (
    ("Name", 4),
    ("Density lbs/in^3", 15),
    ("R", 1),
    ("G", 1),
    ("B", 1),
)


def _channel(box: TextBox) -> int:
    value = _leading_int(box.text)
    return 0 if value is None else value & 0xFF


class MaterialForm:
    """Text boxes for a material's name, density and colour, with buttons."""

    def __init__(self, theme: ColorPalette, width: float, height: float) -> None:
        self.theme = theme
        self.width = width
        self.height = height
        self.pos = (width * 0.18, height * 0.05)
        self.companion: Optional[Material] = None
        px, py = self.pos

        def rect(x, y, w, h) -> Rect:
            return Rect(px + width * x, py + height * y, width * w, height * h)

        self.name_box = TextBox(rect=rect(0.005, 0.005, 0.19, 0.05), char_count=20)
        self.density_box = TextBox(rect=rect(0.005, 0.1, 0.19, 0.05), char_count=20)
        self.r_box = TextBox(rect=rect(0.005, 0.2, 0.06, 0.05), char_count=4)
        self.g_box = TextBox(rect=rect(0.07, 0.2, 0.06, 0.05), char_count=4)
        self.b_box = TextBox(rect=rect(0.135, 0.2, 0.06, 0.05), char_count=4)
        self.boxes = (self.name_box, self.density_box, self.r_box, self.g_box, self.b_box)
        self._apply_defaults()

        def button(x, text, color) -> Button:
            return make_button(rect(x, 0.26, 0.065, 0.08), text, color, theme)

        self.cancel_button = button(0.00125, "Cancel", theme.black)
        self.save_button = button(0.06625, "Save", theme.accent1)
        self.delete_button = button(0.1325, "Delete", theme.dark)

    def _apply_defaults(self) -> None:
        for box, (text, index) in zip(self.boxes, _DEFAULTS):
            box.is_typing = False
            box.text = text
            box.text_index = index

    def reset(self) -> None:
        """Restore the placeholder texts and forget the edited material."""
        self._apply_defaults()
        self.companion = None

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
        return GuiResult.NOTHING

    def to_material(self, materials: List[Material]) -> Material:
        """Write the form into its material, appending a new one to ``materials``.

        An unreadable density becomes 1 and unreadable channels 0; channels
        wrap to 8 bits and alpha is always 255. The texture is cleared.
        """
        density = _leading_float(self.density_box.text)
        values = dict(
            name=self.name_box.text,
            density=1.0 if density is None else density,
            color=Color(_channel(self.r_box), _channel(self.g_box), _channel(self.b_box), 255),
            texture=None,
        )
        if self.companion is None:
            self.companion = Material(**values)
            materials.append(self.companion)
        else:
            for name, value in values.items():
                setattr(self.companion, name, value)
        return self.companion

    def load_material(self, material: Material) -> None:
        """Make ``material`` the form's material and show its values."""
        self.companion = material
        self.name_box.set_text(material.name)
        self.density_box.set_text(f"{material.density:f}")
        self.r_box.set_text(str(material.color.r))
        self.g_box.set_text(str(material.color.g))
        self.b_box.set_text(str(material.color.b))