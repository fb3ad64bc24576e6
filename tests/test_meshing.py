import pytest

from daedalusview.meshing import Mesh, MeshBuilder, gen_rect_tube
from daedalusview.model import Dimensions, SceneObject


def _tube(facing, x=4.0, y=2.0, z=3.0, t=0.5):
    return SceneObject(data=Dimensions(x_length=x, y_height=y, z_depth=z, thickness=t, facing=facing))


def _cross_of_first_triangle(mesh):
    p0, p1, p2 = mesh.vertices[:3]
    u = [p1[i] - p0[i] for i in range(3)]
    v = [p2[i] - p0[i] for i in range(3)]
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def test_add_vertex_records_all_attributes():
    builder = MeshBuilder()
    builder.add_vertex((1, 2, 3), (0.5, 0.25), (0, 1, 0))
    builder.add_vertex((0, 0, 0), (0, 0))
    builder.add_vertex((1, 1, 1), (1, 1))
    mesh = builder.build()
    assert mesh.vertices[0] == (1.0, 2.0, 3.0)
    assert mesh.texcoords[0] == (0.5, 0.25)
    assert mesh.normals[0] == (0.0, 1.0, 0.0)
    assert mesh.normals[1] == (0.0, 0.0, 0.0)
    assert mesh.triangle_count == 1


def test_build_rejects_partial_triangle():
    builder = MeshBuilder()
    builder.add_vertex((0, 0, 0), (0, 0))
    with pytest.raises(ValueError):
        builder.build()


def test_plane_unknown_axis():
    with pytest.raises(ValueError):
        MeshBuilder().plane("w", 0, 0, 1, 1, 0)


def test_z_plane_layout():
    builder = MeshBuilder()
    builder.plane("z", 0, 0, 2, 3, 5)
    mesh = builder.build()
    assert mesh.vertex_count == 6
    assert mesh.vertices[1] == (2.0, 3.0, 5.0)
    assert mesh.texcoords[1] == (1.0, 1.0)
    assert mesh.texcoords[2] == (1.0, 0.0)
    assert all(n == (0.0, 0.0, 1.0) for n in mesh.normals)
    assert {v[2] for v in mesh.vertices} == {5.0}


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_flipping_reverses_winding(axis):
    normal = MeshBuilder()
    normal.plane(axis, 0, 0, 1, 1, 0)
    flipped = MeshBuilder()
    flipped.plane(axis, 0, 0, 1, 1, 0, True)
    a = _cross_of_first_triangle(normal.build())
    b = _cross_of_first_triangle(flipped.build())
    assert tuple(-c for c in a) == b


def test_untextured_flipped_x_plane_texcoords():
    builder = MeshBuilder()
    builder.plane("x", 0, 0, 1, 1, 0, True)
    mesh = builder.build()
    assert mesh.vertices[2] == (0.0, 1.0, 0.0)
    assert mesh.texcoords[2] == (1.0, 0.0)


def test_textured_x_plane_maps_u_to_second_coordinate():
    builder = MeshBuilder()
    builder.plane("x", 0, 0, 1, 1, 7, False, (0.1, 0.2, 0.3, 0.4))
    mesh = builder.build()
    assert mesh.vertices[1] == (7.0, 1.0, 0.0)
    assert mesh.texcoords[1] == (0.1, 0.4)


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_rect_tube_triangle_count(facing):
    mesh = gen_rect_tube(_tube(facing))
    assert mesh.triangle_count == 32
    assert mesh.vertex_count == 96
    assert len(mesh.texcoords) == len(mesh.normals) == 96


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_rect_tube_bounds_match_dimensions(facing):
    obj = _tube(facing)
    mesh = gen_rect_tube(obj)
    for axis, size in enumerate((obj.data.x_length, obj.data.y_height, obj.data.z_depth)):
        values = [v[axis] for v in mesh.vertices]
        assert min(values) == pytest.approx(0.0)
        assert max(values) == pytest.approx(size)


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_rect_tube_normals_are_unit_axes(facing):
    mesh = gen_rect_tube(_tube(facing))
    axes = {(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)}
    assert set(mesh.normals) <= axes


@pytest.mark.parametrize("facing", ["x", "y", "z"])
def test_rect_tube_texcoords_in_unit_square(facing):
    mesh = gen_rect_tube(_tube(facing))
    for u, v in mesh.texcoords:
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_rect_tube_inner_walls_at_thickness():
    obj = _tube("x", t=0.5)
    mesh = gen_rect_tube(obj)
    zs = {round(v[2], 9) for v in mesh.vertices}
    assert 0.5 in zs
    assert obj.data.z_depth - 0.5 in zs


def test_rect_tube_unknown_facing():
    with pytest.raises(ValueError):
        gen_rect_tube(_tube("q"))


def test_empty_mesh_counts():
    mesh = Mesh()
    assert mesh.vertex_count == 0
    assert mesh.triangle_count == 0