"""Choosing the mesh for a scene object and where its outline is drawn."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, NamedTuple, Optional

from .meshing import Mesh, gen_rect_tube
from .model import CYLINDER_RING, Color, SceneObject, Shape, Vector3
from .roundtube import gen_round_tube

SPHERE_RINGS = 20
SPHERE_SLICES = 20


class MeshKind(Enum):
    CUBE = auto()
    RECT_TUBE = auto()
    CYLINDER = auto()
    ROUND_TUBE = auto()
    SPHERE = auto()


@dataclass
class ModelSpec:
    """What to render for an object.

    Built-in shapes are described by ``params``: a cube by its three sizes, a
    cylinder by (radius, height, sides), a sphere by (radius, rings, slices).
    Tubes carry their own ``mesh``. ``rotation`` is in radians and is applied
    before ``translation``.
    """

    kind: MeshKind
    params: tuple = ()
    mesh: Optional[Mesh] = None
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)
    texture: Optional[Any] = None
    color: Color = Color(0, 0, 0, 0)


class _OutlineCircle(NamedTuple):
    center: Vector3
    radius: float
    axis: Vector3
    angle: float


def _cylinder(obj: SceneObject) -> tuple[tuple, Vector3]:
    d = obj.data
    if d.facing == "x":
        return (d.y_height, d.x_length, CYLINDER_RING), Vector3(z=math.radians(-90))
    if d.facing == "y":
        return (d.x_length, d.y_height, CYLINDER_RING), Vector3()
    if d.facing == "z":
        return (d.x_length, d.z_depth, CYLINDER_RING), Vector3(x=math.radians(90))
    raise ValueError(f"unknown facing: {d.facing!r}")


def model_object(obj: SceneObject) -> ModelSpec:
    """Build the model for ``obj``, store it on ``obj.model`` and return it."""
    d = obj.data
    rotation = Vector3()
    mesh: Optional[Mesh] = None
    params: tuple = ()
    if obj.shape is Shape.RECTANGLE:
        if d.thickness == 0:
            kind, params = MeshKind.CUBE, (d.x_length, d.y_height, d.z_depth)
        else:
            kind, mesh = MeshKind.RECT_TUBE, gen_rect_tube(obj)
    elif obj.shape is Shape.CYLINDER:
        if d.thickness != 0:
            kind, mesh = MeshKind.ROUND_TUBE, gen_round_tube(obj)
        else:
            kind = MeshKind.CYLINDER
            params, rotation = _cylinder(obj)
    else:
        kind, params = MeshKind.SPHERE, (d.x_length, SPHERE_RINGS, SPHERE_SLICES)

    spec = ModelSpec(
        kind=kind,
        params=params,
        mesh=mesh,
        rotation=rotation,
        translation=Vector3(obj.x_pos.constant, obj.y_pos, obj.z_pos),
        texture=obj.material.texture,
        color=obj.material.color,
    )
    obj.model = spec
    return spec


def draw_offset(obj: SceneObject, pmt: float) -> Vector3:
    """Offset at which the model is drawn for parameter ``pmt``.

    Solid boxes are centred meshes, so they are shifted by half their size.
    """
    moved = pmt * obj.x_pos.meter
    d = obj.data
    if obj.shape is Shape.RECTANGLE and d.thickness == 0:
        return Vector3(moved + d.x_length / 2, d.y_height / 2, d.z_depth / 2)
    return Vector3(moved, 0.0, 0.0)


def cylinder_outline(obj: SceneObject, pmt: float) -> list:
    """Circles outlining a cylinder's two ends; inner rings first for hollow ones.

    Each entry has ``center``, ``radius``, rotation ``axis`` and ``angle`` in
    degrees. Objects that are not cylinders have no outline.
    """
    if obj.shape is not Shape.CYLINDER:
        return []
    d = obj.data
    start = Vector3(obj.x_pos.at(pmt), obj.y_pos, obj.z_pos)
    if d.facing == "x":
        radius, axis, angle = d.y_height, Vector3(0, 1, 0), 90.0
        end = Vector3(start.x + d.x_length, start.y, start.z)
    elif d.facing == "y":
        radius, axis, angle = d.x_length, Vector3(1, 0, 0), 90.0
        end = Vector3(start.x, start.y + d.y_height, start.z)
    elif d.facing == "z":
        radius, axis, angle = d.x_length, Vector3(1, 0, 0), 0.0
        end = Vector3(start.x, start.y, start.z + d.z_depth)
    else:
        return []
    radii = [radius - d.thickness, radius] if d.thickness != 0 else [radius]
    return [_OutlineCircle(center, r, axis, angle) for r in radii for center in (start, end)]