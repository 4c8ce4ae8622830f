import logging

import pytest

from charcell_renderer import Cell, Face, InvalidGeometry, Line3D, Mesh, Transform3D, Vec3


def test_cube_layout():
    cube = Mesh.cube(2.0)
    assert len(cube.vertices) == 8
    assert len(cube.faces) == 6
    assert all(len(f.indices) == 4 for f in cube.faces)


def test_cube_faces_wind_outward():
    cube = Mesh.cube(2.0)
    for face in cube.faces:
        v0, v1, v2 = (cube.vertices[i] for i in face.indices[:3])
        normal = (v1 - v0).cross(v2 - v0)
        centroid = sum((cube.vertices[i] for i in face.indices), Vec3.ZERO) / len(face.indices)
        assert normal.dot(centroid) > 0


def test_cube_fill_and_transform():
    t = Transform3D(Vec3(0, 0, 4))
    cube = Mesh.cube(1.0, fill='@', filled=False, transform=t)
    assert all(f.fill == Cell('@') and not f.filled for f in cube.faces)
    assert min(v.z for v in cube.world_vertices()) == pytest.approx(3.5)
    # The stored vertices are untouched
    assert min(v.z for v in cube.vertices) == pytest.approx(-0.5)


def test_face_needs_three_indices():
    with pytest.raises(InvalidGeometry):
        Face([0, 1])


def test_mesh_rejects_bad_indices():
    with pytest.raises(InvalidGeometry):
        Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [[0, 1, 3]])


def test_mesh_accepts_tuples_and_lists():
    mesh = Mesh([[0, 0, 0], (1, 0, 0), Vec3(0, 1, 0)], [Face((0, 1, 2), '%')])
    assert mesh.vertices[2] == Vec3(0, 1, 0)
    assert mesh.faces[0].fill == Cell('%')


OBJ = """\
# a square pyramid
o pyramid
v 0 1 0
v -1 0 -1
v 1 0 -1
v 1 0 1
v -1 0 1
vn 0 1 0
f 1/1/1 2/2/1 3/3/1
f 1 3 4
f -5 -2 -1
f 2 5 4 3
f 1 2 9
"""


def test_from_obj(tmp_path, caplog):
    path = tmp_path / "pyramid.obj"
    path.write_text(OBJ)
    with caplog.at_level(logging.WARNING, logger="charcell_renderer.mesh"):
        mesh = Mesh.from_obj(path, fill='^')

    assert len(mesh.vertices) == 5
    assert [f.indices for f in mesh.faces] == [(0, 1, 2), (0, 2, 3), (0, 3, 4), (1, 4, 3, 2)]
    assert all(f.fill == Cell('^') for f in mesh.faces)
    assert "dropping face" in caplog.text


def test_from_obj_negative_indices_use_vertices_read_so_far(tmp_path):
    path = tmp_path / "two_tris.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\n"
                    "f -3 -2 -1\n"
                    "v 5 0 0\nv 6 0 0\nv 5 1 0\n"
                    "f -3 -2 -1\n"
                    "f -7 1 2\n")
    mesh = Mesh.from_obj(path)
    assert len(mesh.vertices) == 6
    assert [f.indices for f in mesh.faces] == [(0, 1, 2), (3, 4, 5)]


def test_from_obj_without_faces(tmp_path):
    path = tmp_path / "empty.obj"
    path.write_text("v 0 0 0\nv 1 1 1\n")
    with pytest.raises(InvalidGeometry):
        Mesh.from_obj(path)


def test_from_obj_missing_file(tmp_path):
    with pytest.raises(OSError):
        Mesh.from_obj(tmp_path / "nope.obj")


def test_line3d_coerces():
    line = Line3D((0, 0, 1), (1, 1, 1), '|')
    assert line.start == Vec3(0, 0, 1)
    assert line.fill == Cell('|')
    assert line.transform == Transform3D.IDENTITY
