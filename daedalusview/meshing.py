"""Triangle meshes built from axis-aligned quads, and the rectangular tube mesh."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .model import SceneObject

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]

_NORMALS: dict[str, Vec3] = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
}

# Corner selections for the six vertices of a quad: (use a2, use b2).
_ORDER_A = ((0, 0), (1, 1), (1, 0), (0, 0), (0, 1), (1, 1))
_ORDER_B = ((0, 0), (1, 0), (1, 1), (0, 0), (1, 1), (0, 1))

_UNIT_TEX = (0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True)
class Mesh:
    """Unindexed triangle data: three entries per triangle in each list."""

    vertices: tuple[Vec3, ...] = ()
    texcoords: tuple[Vec2, ...] = ()
    normals: tuple[Vec3, ...] = ()

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.vertices) // 3


def _place(axis: str, a: float, b: float, level: float) -> Vec3:
    if axis == "z":
        return (a, b, level)
    if axis == "x":
        return (level, a, b)
    if axis == "y":
        return (a, level, b)
    raise ValueError(f"unknown axis: {axis!r}")


@dataclass
class MeshBuilder:
    """Accumulates vertices into a :class:`Mesh`."""

    vertices: list = field(default_factory=list)
    texcoords: list = field(default_factory=list)
    normals: list = field(default_factory=list)

    def add_vertex(self, position: Sequence[float], texcoord: Sequence[float],
                   normal: Optional[Sequence[float]] = None) -> None:
        x, y, z = position
        u, v = texcoord
        nx, ny, nz = normal if normal is not None else (0.0, 0.0, 0.0)
        self.vertices.append((float(x), float(y), float(z)))
        self.texcoords.append((float(u), float(v)))
        self.normals.append((float(nx), float(ny), float(nz)))

    def plane(self, axis: str, a: float, b: float, a2: float, b2: float, level: float,
              flipped: bool = False, tex: Optional[Sequence[float]] = None) -> None:
        """Add a quad (two triangles) perpendicular to ``axis`` at ``level``.

        ``(a, b)`` and ``(a2, b2)`` are opposite corners in the plane's two
        remaining coordinates, in x, y, z order. ``flipped`` reverses the
        winding. ``tex`` is ``(u1, v1, u2, v2)``; without it the quad spans the
        whole texture.
        """
        if axis not in _NORMALS:
            raise ValueError(f"unknown axis: {axis!r}")
        if axis == "z":
            order = _ORDER_B if flipped else _ORDER_A
        else:
            order = _ORDER_A if flipped else _ORDER_B
        # Quads facing x map texture u along their second coordinate, except
        # the untextured reversed quad, which maps like the other axes.
        swap = axis == "x" and (tex is not None or not flipped)
        u1, v1, u2, v2 = tex if tex is not None else _UNIT_TEX
        us, vs = (u1, u2), (v1, v2)
        corners_a, corners_b = (a, a2), (b, b2)
        normal = _NORMALS[axis]
        for ia, ib in order:
            su, sv = (ib, ia) if swap else (ia, ib)
            self.add_vertex(
                _place(axis, corners_a[ia], corners_b[ib], level),
                (us[su], vs[sv]),
                normal,
            )

    def build(self) -> Mesh:
        if len(self.vertices) % 3:
            raise ValueError("vertex count is not a multiple of three")
        return Mesh(tuple(self.vertices), tuple(self.texcoords), tuple(self.normals))


def _tube_x(m: MeshBuilder, l: float, h: float, d: float, t: float) -> None:
    m.plane("z", 0, 0, l, h, 0, False)
    m.plane("z", 0, 0, l, h, d, True)
    m.plane("y", 0, 0, l, d, h, True)
    m.plane("y", 0, 0, l, d, 0, False)
    far = (0, 0, t / d, 1)
    close = (1, 0, (d - t) / d, 1)
    top = (t / d, (h - t) / h, (d - t) / d, 1)
    bot = (t / d, 0, (d - t) / d, t / h)
    m.plane("x", 0, 0, h, t, 0, True, far)
    m.plane("x", 0, d, h, d - t, 0, False, close)
    m.plane("x", h - t, t, h, d - t, 0, True, top)
    m.plane("x", 0, t, t, d - t, 0, True, bot)
    m.plane("x", 0, 0, h, t, l, False, far)
    m.plane("x", 0, d, h, d - t, l, True, close)
    m.plane("x", h - t, t, h, d - t, l, False, top)
    m.plane("x", 0, t, t, d - t, l, False, bot)
    m.plane("z", 0, t, l, h - t, t, True)
    m.plane("z", 0, t, l, h - t, d - t, False)
    m.plane("y", 0, t, l, d - t, t, True)
    m.plane("y", 0, t, l, d - t, h - t, False)


def _tube_y(m: MeshBuilder, d: float, l: float, h: float, t: float) -> None:
    m.plane("x", 0, 0, l, h, 0, True)
    m.plane("x", 0, 0, l, h, d, False)
    m.plane("z", 0, 0, d, l, h, True)
    m.plane("z", 0, 0, d, l, 0, False)
    far = (0, 0, t / d, 1)
    close = (1, 0, (d - t) / d, 1)
    top = (t / d, (h - t) / h, (d - t) / d, 1)
    bot = (t / d, 0, (d - t) / d, t / h)
    m.plane("y", 0, 0, t, h, 0, False, far)
    m.plane("y", d, 0, d - t, h, 0, True, close)
    m.plane("y", t, h - t, d - t, h, 0, False, top)
    m.plane("y", t, 0, d - t, t, 0, False, bot)
    m.plane("y", 0, 0, t, h, l, True, far)
    m.plane("y", d, 0, d - t, h, l, False, close)
    m.plane("y", t, h - t, d - t, h, l, True, top)
    m.plane("y", t, 0, d - t, t, l, True, bot)
    m.plane("x", 0, t, l, h - t, t, False)
    m.plane("x", 0, t, l, h - t, d - t, True)
    m.plane("z", t, 0, d - t, l, t, True)
    m.plane("z", t, 0, d - t, l, h - t, False)


def _tube_z(m: MeshBuilder, h: float, d: float, l: float, t: float) -> None:
    m.plane("y", 0, 0, h, l, 0, False)
    m.plane("y", 0, 0, h, l, d, True)
    m.plane("x", 0, 0, d, l, h, False)
    m.plane("x", 0, 0, d, l, 0, True)
    far = (0, 0, 1, t / d)
    close = (0, 1, 1, (d - t) / d)
    top = ((h - t) / h, t / d, 1, (d - t) / d)
    bot = (0, t / d, t / h, (d - t) / d)
    m.plane("z", 0, 0, h, t, 0, False, far)
    m.plane("z", 0, d, h, d - t, 0, True, close)
    m.plane("z", h - t, t, h, d - t, 0, False, top)
    m.plane("z", 0, t, t, d - t, 0, False, bot)
    m.plane("z", 0, 0, h, t, l, True, far)
    m.plane("z", 0, d, h, d - t, l, False, close)
    m.plane("z", h - t, t, h, d - t, l, True, top)
    m.plane("z", 0, t, t, d - t, l, True, bot)
    m.plane("y", t, 0, h - t, l, t, True)
    m.plane("y", t, 0, h - t, l, d - t, False)
    m.plane("x", t, 0, d - t, l, t, False)
    m.plane("x", t, 0, d - t, l, h - t, True)


def gen_rect_tube(obj: SceneObject) -> Mesh:
    """Mesh a hollow rectangular tube of wall ``thickness`` running along ``facing``."""
    data = obj.data
    t = data.thickness
    builder = MeshBuilder()
    if data.facing == "x":
        _tube_x(builder, data.x_length, data.y_height, data.z_depth, t)
    elif data.facing == "y":
        _tube_y(builder, data.x_length, data.y_height, data.z_depth, t)
    elif data.facing == "z":
        _tube_z(builder, data.x_length, data.y_height, data.z_depth, t)
    else:
        raise ValueError(f"unknown facing: {data.facing!r}")
    return builder.build()