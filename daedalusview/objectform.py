"""The side panel used to edit a scene object's name, placement, size, shape and material."""

from __future__ import annotations

import re
from dataclasses import fields, replace
from typing import Optional, Sequence

from .model import (
    BLUE,
    WEIGHT_MATERIAL,
    ColorPalette,
    Dimensions,
    GuiResult,
    InputState,
    Key,
    Material,
    Position,
    Rect,
    SceneObject,
    Shape,
    TextBox,
)
from .widgets import Button, make_button

_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT = re.compile(r"\s*[+-]?\d+")

# Approximate width of the "Thickness:  " label, in multiples of its font size.
_THICKNESS_LABEL_EMS = 6.0

_TYPE_CAPTIONS = {
    Shape.RECTANGLE: "Rectangle",
    Shape.CYLINDER: "Cylinder",
    Shape.SPHERE: "Sphere",
}
_FACING_TO_CAPTION = {"x": "X", "y": "Y", "z": "Z"}
_CAPTION_TO_FACING = {"X": "x", "Y": "y", "Z": "z"}
_NEXT_FACING = {"X": "Y", "Y": "Z"}


def _leading_float(text: str) -> Optional[float]:
    """The number at the start of ``text``, or None when there is none."""
    match = _FLOAT.match(text)
    return float(match.group()) if match else None


def _leading_int(text: str) -> Optional[int]:
    """The integer at the start of ``text``, or None when there is none."""
    match = _INT.match(text)
    return int(match.group()) if match else None


def _float_or(box: TextBox, default: float) -> float:
    value = _leading_float(box.text)
    return default if value is None else value


def _size(box: TextBox) -> float:
    value = _leading_float(box.text)
    return 1.0 if value is None or value <= 0 else value


def _cycle_focus(boxes: Sequence[TextBox], inputs: InputState) -> Optional[GuiResult]:
    """Handle typing focus; Tab moves to the next box, dropping the typed tab."""
    for i, box in enumerate(boxes):
        if box.is_typing:
            if inputs.key_pressed(Key.TAB):
                box.is_typing = False
                if box.text_index > 0:
                    box.text_index -= 1
                    box.text = box.text[:box.text_index]
                boxes[(i + 1) % len(boxes)].is_typing = True
            return GuiResult.TYPING
    if inputs.key_pressed(Key.TAB):
        boxes[0].is_typing = True
        return GuiResult.TYPING
    return None


def _find_material(materials: Sequence[Material], name: str) -> Material:
    for material in materials:
        if not material.name:
            return replace(materials[0])
        if material.name == name:
            return replace(material)
    return Material()


class ObjectForm:
    """Text boxes and buttons describing one :class:`SceneObject`."""

    def __init__(self, theme: ColorPalette, width: float, height: float) -> None:
        self.theme = theme
        self.width = width
        self.height = height
        self.pos = (width * 0.79, height * 0.025)
        self.companion: Optional[SceneObject] = None
        px, py = self.pos

        def box(x, y, w, h, count, text, index=None):
            return TextBox(
                text=text,
                rect=Rect(px + width * x, py + height * y, width * w, height * h),
                char_count=count,
                text_index=len(text) if index is None else index,
            )

        self.name_box = box(0.005, 0.005, 0.19, 0.05, 20, "Name")
        self.x_constant_box = box(0.005, 0.0875, 0.04, 0.025, 6, "0", 0)
        self.x_meter_box = box(0.05, 0.0875, 0.04, 0.025, 6, "0", 0)
        self.y_box = box(0.095, 0.0875, 0.04, 0.025, 6, "0", 0)
        self.z_box = box(0.14, 0.0875, 0.04, 0.025, 6, "0", 0)
        self.x_length_box = box(0.005, 0.15, 0.04, 0.025, 6, "1", 0)
        self.y_height_box = box(0.05, 0.15, 0.04, 0.025, 6, "1", 0)
        self.z_depth_box = box(0.095, 0.15, 0.04, 0.025, 6, "1", 0)
        label_size = height / 32
        self.thickness_box = TextBox(
            text="0",
            rect=Rect(
                px + width * 0.005 + label_size * _THICKNESS_LABEL_EMS,
                py + height * 0.15 + label_size,
                width * 0.075,
                height * 0.025,
            ),
            char_count=10,
            text_index=0,
        )
        self.material_box = box(0.095, 0.215, 0.08, 0.05, 20, "M")
        self.boxes = (
            self.name_box,
            self.x_constant_box,
            self.x_meter_box,
            self.y_box,
            self.z_box,
            self.x_length_box,
            self.y_height_box,
            self.z_depth_box,
            self.thickness_box,
            self.material_box,
        )

        def button(x, y, w, h, text, color) -> Button:
            rect = Rect(px + width * x, py + height * y, width * w, height * h)
            return make_button(rect, text, color, theme)

        self.cancel_button = button(0.105, 0.475, 0.08, 0.08, "Cancel", theme.black)
        self.material_button = button(0.005, 0.215, 0.085, 0.05, "Material", theme.accent2)
        self.facing_button = button(0.095, 0.27, 0.08, 0.06, "X", theme.accent2)
        self.save_button = button(0.01, 0.475, 0.08, 0.08, "Save", theme.accent1)
        self.type_button = button(0.01, 0.375, 0.08, 0.08, "Rectangle", theme.accent2)
        self.delete_button = button(0.105, 0.375, 0.08, 0.08, "Delete", theme.dark)

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
        if self.type_button.poll(inputs) or inputs.chord(Key.T):
            self.cycle_type()
            return GuiResult.NOTHING
        if self.material_button.poll(inputs) or inputs.chord(Key.M):
            self.toggle_material()
        if self.facing_button.poll(inputs) or inputs.chord(Key.F):
            self.cycle_facing()
            return GuiResult.CHANGE_FACING
        return GuiResult.NOTHING

    def cycle_type(self) -> None:
        """Rectangle, then Cylinder, then Sphere, then back to Rectangle."""
        first = self.type_button.text[:1]
        if first == "R":
            self.type_button.text = "Cylinder"
        elif first == "C":
            self.type_button.text = "Sphere"
        else:
            self.type_button.text = "Rectangle"

    def cycle_facing(self) -> None:
        """X, then Y, then Z, then back to X."""
        self.facing_button.text = _NEXT_FACING.get(self.facing_button.text[:1], "X")

    def toggle_material(self) -> None:
        """Switch between a named material and a plain weight."""
        if self.material_button.text == WEIGHT_MATERIAL:
            self.material_button.text = "Material"
        else:
            self.material_button.text = WEIGHT_MATERIAL

    def _shape(self) -> Shape:
        first = self.type_button.text[:1]
        if first == "R":
            return Shape.RECTANGLE
        if first == "C":
            return Shape.CYLINDER
        return Shape.SPHERE

    def _material(self, materials: Sequence[Material]) -> Material:
        if self.material_button.text[:1] == "W":
            density = _leading_float(self.material_box.text)
            return Material(
                name=WEIGHT_MATERIAL,
                density=0.0 if density is None else density,
                color=BLUE,
                texture=None,
            )
        return _find_material(materials, self.material_box.text)

    def to_object(self, materials: Sequence[Material]) -> SceneObject:
        """Read the form into its object, replacing every field; returns the object.

        Unreadable positions and thickness become 0, unreadable or non-positive
        sizes become 1. A named material is copied from ``materials``.
        """
        obj = SceneObject(
            name=self.name_box.text,
            x_pos=Position(
                constant=_float_or(self.x_constant_box, 0.0),
                meter=_float_or(self.x_meter_box, 0.0),
            ),
            y_pos=_float_or(self.y_box, 0.0),
            z_pos=_float_or(self.z_box, 0.0),
            data=Dimensions(
                x_length=_size(self.x_length_box),
                y_height=_size(self.y_height_box),
                z_depth=_size(self.z_depth_box),
                thickness=_float_or(self.thickness_box, 0.0),
                facing=_CAPTION_TO_FACING.get(self.facing_button.text[:1], "x"),
            ),
            shape=self._shape(),
            material=self._material(materials),
        )
        if self.companion is None:
            self.companion = obj
        else:
            for f in fields(SceneObject):
                setattr(self.companion, f.name, getattr(obj, f.name))
        return self.companion

    def load_object(self, obj: SceneObject) -> None:
        """Make ``obj`` the form's object and show its values."""
        self.companion = obj
        self.name_box.set_text(obj.name)
        numbers = (
            (self.x_constant_box, obj.x_pos.constant),
            (self.x_meter_box, obj.x_pos.meter),
            (self.y_box, obj.y_pos),
            (self.z_box, obj.z_pos),
            (self.x_length_box, obj.data.x_length),
            (self.y_height_box, obj.data.y_height),
            (self.z_depth_box, obj.data.z_depth),
            (self.thickness_box, obj.data.thickness),
        )
        for box, value in numbers:
            box.set_text(f"{value:.2f}")
        self.type_button.text = _TYPE_CAPTIONS[obj.shape]
        self.facing_button.text = _FACING_TO_CAPTION.get(obj.data.facing, "X")
        if obj.material.name == WEIGHT_MATERIAL:
            self.material_button.text = WEIGHT_MATERIAL
            self.material_box.set_text(f"{obj.material.density:.2f}")
        else:
            self.material_button.text = "Material"
            self.material_box.set_text(obj.material.name)