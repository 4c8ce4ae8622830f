import pytest

from charcell_renderer import Line, Mesh, PixelContainer, Scene, Transform3D, Vec3


def test_scene_keeps_insertion_order():
    scene = Scene()
    a, b = Line((0, 0), (1, 1)), Mesh.cube()
    scene.add(a)
    scene.add(b, Transform3D(Vec3(0, 0, 5)))
    assert [obj for obj, _ in scene] == [a, b]
    assert len(scene) == 2


def test_scene_rejects_non_drawables():
    scene = Scene()
    with pytest.raises(TypeError):
        scene.add("not a shape")
    with pytest.raises(TypeError):
        scene.add(Line((0, 0), (1, 1)), Transform3D())


def test_scene_accepts_containers():
    scene = Scene()
    scene.add(PixelContainer())
    assert len(scene) == 1


def test_remove_and_clear():
    scene = Scene()
    cube = Mesh.cube()
    line = Line((0, 0), (2, 2))
    scene.extend([cube, line, cube])
    scene.remove(cube)
    assert [obj for obj, _ in scene] == [line]
    scene.clear()
    assert len(scene) == 0
