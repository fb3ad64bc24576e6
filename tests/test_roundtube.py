import math

import pytest

from daedalusview.model import CYLINDER_RING, Dimensions, SceneObject, Shape
from daedalusview.roundtube import gen_round_tube


def _pipe(facing, x=3.0, y=2.0, z=3.0, t=0.5):
    return SceneObject(
        shape=Shape.CYLINDER,
        data=Dimensions(x_length=x, y_height=y, z_depth=z, thickness=t, facing=facing),
    )


def _cross(a, b):
    return (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])


def _sub(a, b):
    return tuple(p - q for p, q in zip(a, b))


def _dot(a, b):
    return sum(p * q for p, q in zip(a, b))


def _tri_facing(mesh, start):
    v1, v2, v3 = mesh.vertices[start:start + 3]
    return _dot(_cross(_sub(v2, v1), _sub(v3, v1)), mesh.normals[start])


def test_triangle_count_follows_slices():
    mesh = gen_round_tube(_pipe("x", x=3.0))
    assert mesh.triangle_count == 4 * CYLINDER_RING * 3 + 4 * CYLINDER_RING
    assert len(mesh.texcoords) == len(mesh.normals) == mesh.vertex_count


def test_fractional_length_truncates_slice_count():
    assert gen_round_tube(_pipe("x", x=2.7)).triangle_count == gen_round_tube(_pipe("x", x=2.0)).triangle_count


def test_short_tube_has_only_end_rings():
    mesh = gen_round_tube(_pipe("z", z=0.5))
    assert mesh.triangle_count == 4 * CYLINDER_RING


def test_first_vertex_is_top_of_outer_ring():
    mesh = gen_round_tube(_pipe("x", y=2.0))
    assert mesh.vertices[0] == pytest.approx((0.0, 0.0, 2.0))
    assert mesh.texcoords[0] == (0.0, 0.0)


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_vertices_lie_on_inner_or_outer_ring(facing):
    obj = _pipe(facing)
    mesh = gen_round_tube(obj)
    d = obj.data
    radius = d.y_height if facing == "x" else d.x_length
    length = {"x": d.x_length, "y": d.y_height, "z": d.z_depth}[facing]
    along = "xyz".index(facing)
    for vertex in mesh.vertices:
        rest = [c for k, c in enumerate(vertex) if k != along]
        dist = math.hypot(*rest)
        assert dist == pytest.approx(radius) or dist == pytest.approx(radius - d.thickness)
        assert -1e-9 <= vertex[along] <= length + 1e-9


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_normals_are_unit_length(facing):
    mesh = gen_round_tube(_pipe(facing))
    for normal in mesh.normals:
        assert math.sqrt(_dot(normal, normal)) == pytest.approx(1.0)


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_outer_wall_faces_outward_inner_wall_inward(facing):
    obj = _pipe(facing)
    mesh = gen_round_tube(obj)
    slices = int({"x": obj.data.x_length, "y": obj.data.y_height, "z": obj.data.z_depth}[facing])
    inner_start = slices * CYLINDER_RING * 6
    assert _tri_facing(mesh, 0) > 0
    assert _tri_facing(mesh, inner_start) < 0


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_end_caps_use_face_normal(facing):
    mesh = gen_round_tube(_pipe(facing))
    expected = tuple(1.0 if axis == facing else 0.0 for axis in "xyz")
    caps = mesh.normals[-2 * CYLINDER_RING * 6:]
    assert all(n == expected for n in caps)


def test_texcoords_within_unit_square():
    mesh = gen_round_tube(_pipe("y"))
    for u, v in mesh.texcoords:
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_unknown_facing_rejected():
    with pytest.raises(ValueError):
        gen_round_tube(_pipe("w"))


def test_zero_radius_rejected():
    with pytest.raises(ValueError):
        gen_round_tube(_pipe("x", y=0.0))