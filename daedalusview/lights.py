"""Scene lights and the shader uniform values that describe them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .model import MAX_LIGHTS, Color, Vector3


class LightType(IntEnum):
    DIRECTIONAL = 0
    POINT = 1


@dataclass
class Light:
    """A light; ``slot`` is its index in the shader's light array, if it has one."""

    type: LightType = LightType.DIRECTIONAL
    enabled: bool = False
    position: Vector3 = Vector3()
    target: Vector3 = Vector3()
    color: Color = Color(0, 0, 0, 0)
    attenuation: float = 0.0
    slot: Optional[int] = None

    def uniforms(self) -> dict:
        """Shader uniform names mapped to the values sent for this light."""
        if self.slot is None:
            return {}
        prefix = f"lights[{self.slot}]"
        c = self.color
        return {
            f"{prefix}.enabled": int(self.enabled),
            f"{prefix}.type": int(self.type),
            f"{prefix}.position": (self.position.x, self.position.y, self.position.z),
            f"{prefix}.target": (self.target.x, self.target.y, self.target.z),
            f"{prefix}.color": (c.r / 255, c.g / 255, c.b / 255, c.a / 255),
        }


@dataclass
class LightSet:
    """Allocates shader slots to lights, up to ``max_lights``."""

    max_lights: int = MAX_LIGHTS
    lights: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lights)

    def create(self, light_type: LightType, position: Vector3, target: Vector3, color: Color) -> Light:
        """Create an enabled light, or a disabled one once every slot is taken."""
        if len(self.lights) >= self.max_lights:
            return Light()
        light = Light(
            type=LightType(light_type),
            enabled=True,
            position=position,
            target=target,
            color=color,
            slot=len(self.lights),
        )
        self.lights.append(light)
        return light