"""Core data types shared by the display layer: colours, geometry, scene objects, input."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Optional

MAX_LIGHTS = 4
SPACING = 16
CYLINDER_RING = 32
WEIGHT_MATERIAL = "Weight"


def spacing_for(size: float) -> float:
    """Letter spacing used for text drawn at ``size``."""
    return 1 if size < SPACING else size / SPACING


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def scaled(self, factor: float) -> "Color":
        """Return the colour with its RGB channels multiplied by ``factor`` (alpha kept)."""
        return Color(
            _channel(self.r * factor),
            _channel(self.g * factor),
            _channel(self.b * factor),
            self.a,
        )


BLUE = Color(0, 121, 241, 255)
BLACK = Color(0, 0, 0, 255)


@dataclass(frozen=True)
class ColorPalette:
    """The six colours a theme is made of."""

    white: Color
    black: Color
    light: Color
    dark: Color
    accent1: Color
    accent2: Color


@dataclass(frozen=True)
class Rect:
    """An axis-aligned screen rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Material:
    """A named material with a density (lbs/in^3) and a display colour."""

    name: str = ""
    density: float = 0.0
    color: Color = Color(0, 0, 0, 0)
    texture: Optional[Any] = None


@dataclass
class Position:
    """A coordinate that moves linearly with the parameter ``pmt``."""

    constant: float = 0.0
    meter: float = 0.0

    def at(self, pmt: float) -> float:
        return self.constant + self.meter * pmt


@dataclass
class Dimensions:
    x_length: float = 1.0
    y_height: float = 1.0
    z_depth: float = 1.0
    thickness: float = 0.0
    facing: str = "x"


class Shape(Enum):
    RECTANGLE = auto()
    CYLINDER = auto()
    SPHERE = auto()


@dataclass
class SceneObject:
    """An object placed in the project scene."""

    name: str = ""
    x_pos: Position = field(default_factory=Position)
    y_pos: float = 0.0
    z_pos: float = 0.0
    data: Dimensions = field(default_factory=Dimensions)
    shape: Shape = Shape.RECTANGLE
    material: Material = field(default_factory=Material)
    model: Optional[Any] = None


@dataclass
class TextBox:
    """An editable single-line text field."""

    text: str = ""
    rect: Rect = Rect(0, 0, 0, 0)
    char_count: int = 0
    text_size: float = 0.0
    text_index: int = 0
    is_typing: bool = False

    def set_text(self, text: str) -> None:
        """Replace the contents and put the cursor after the last character."""
        self.text = text
        self.text_index = len(text)


class GuiResult(Enum):
    NOTHING = auto()
    SAVE = auto()
    CANCEL = auto()
    TYPING = auto()
    CHANGE_FACING = auto()
    DELETE = auto()
    CHANGE_THEME = auto()


class Screen(IntEnum):
    REINIT = -2
    UNKNOWN = -1
    LOGO = 0
    TITLE = 1
    SETTINGS = 2
    CREATEPROJECT = 3
    PROJECTMAIN = 4
    EDITOBJECT = 5
    OPENPROJECT = 6
    MATERIALS = 7


class Key(Enum):
    TAB = auto()
    LEFT_CONTROL = auto()
    ESCAPE = auto()
    S = auto()
    A = auto()
    D = auto()
    T = auto()
    M = auto()
    F = auto()
    Y = auto()
    N = auto()


@dataclass(frozen=True)
class InputState:
    """A snapshot of keyboard and mouse input for one frame."""

    pressed: frozenset = field(default_factory=frozenset)
    down: frozenset = field(default_factory=frozenset)
    repeated: frozenset = field(default_factory=frozenset)
    mouse: tuple = (0.0, 0.0)
    mouse_pressed: bool = False
    mouse_released: bool = False

    def key_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def key_down(self, key: Key) -> bool:
        return key in self.down or key in self.pressed

    def chord(self, key: Key) -> bool:
        """Left control held while ``key`` is pressed."""
        return self.key_down(Key.LEFT_CONTROL) and self.key_pressed(key)