"""Mesh for a hollow round tube (a pipe) lying along one axis."""

from __future__ import annotations

import math
from typing import Callable

from .meshing import Mesh, MeshBuilder
from .model import CYLINDER_RING, SceneObject

Vec3 = tuple[float, float, float]

# Vertex selections for the six vertices of a quad: (second flag, angle step).
# For the walls the flag picks the far end of the slice; for the end caps it
# picks the outer ring.
_PATTERN_A = ((0, 0), (1, 0), (1, 1), (0, 0), (1, 1), (0, 1))
_PATTERN_B = ((0, 0), (1, 1), (1, 0), (0, 0), (0, 1), (1, 1))


def _place_x(along: float, s: float, c: float) -> Vec3:
    return (along, s, c)


def _place_y(along: float, s: float, c: float) -> Vec3:
    return (s, along, c)


def _place_z(along: float, s: float, c: float) -> Vec3:
    return (s, c, along)


_FACINGS: dict[str, tuple[Callable[[float, float, float], Vec3], Vec3, bool]] = {
    "x": (_place_x, (1.0, 0.0, 0.0), False),
    "y": (_place_y, (0.0, 1.0, 0.0), True),
    "z": (_place_z, (0.0, 0.0, 1.0), False),
}


def _wall(builder: MeshBuilder, place, radius: float, slices: int, width: float,
          pattern, precision: int) -> None:
    arc = 2 * math.pi / precision
    for s in range(slices):
        for i in range(precision):
            for end, step in pattern:
                angle = (i + step) * arc
                sin, cos = math.sin(angle), math.cos(angle)
                builder.add_vertex(
                    place((s + end) * width, radius * sin, radius * cos),
                    (end, (i + step) / precision),
                    place(0.0, sin, cos),
                )


def _cap(builder: MeshBuilder, place, along: float, radius: float, thickness: float,
         normal: Vec3, pattern, precision: int) -> None:
    arc = 2 * math.pi / precision
    inner = radius - thickness
    for i in range(precision):
        for outer, step in pattern:
            angle = (i + step) * arc
            ring = radius if outer else inner
            v = thickness / radius if outer else 0.0
            builder.add_vertex(
                place(along, ring * math.sin(angle), ring * math.cos(angle)),
                ((i + step) / precision, v),
                normal,
            )


def gen_round_tube(obj: SceneObject) -> Mesh:
    """Mesh a pipe of wall ``thickness`` running along ``facing``.

    Facing x takes its radius from ``y_height``; facing y or z from
    ``x_length``. The length is cut into whole-unit slices, each wrapped by
    32 quads outside and inside, followed by the two end rings.
    """
    data = obj.data
    try:
        place, face_normal, flipped = _FACINGS[data.facing]
    except KeyError:
        raise ValueError(f"unknown facing: {data.facing!r}") from None
    if data.facing == "x":
        radius, length = data.y_height, data.x_length
    elif data.facing == "y":
        radius, length = data.x_length, data.y_height
    else:
        radius, length = data.x_length, data.z_depth
    if radius == 0:
        raise ValueError("tube radius must be non-zero")

    precision = CYLINDER_RING
    slices = int(length)
    width = length / slices if slices else 0.0
    thickness = data.thickness
    first, second = (_PATTERN_B, _PATTERN_A) if flipped else (_PATTERN_A, _PATTERN_B)

    builder = MeshBuilder()
    _wall(builder, place, radius, slices, width, first, precision)
    _wall(builder, place, radius - thickness, slices, width, second, precision)
    _cap(builder, place, 0.0, radius, thickness, face_normal, first, precision)
    _cap(builder, place, length, radius, thickness, face_normal, second, precision)
    return builder.build()