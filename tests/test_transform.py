import math

import pytest

from charcell_renderer import Mat4, Transform3D, Vec3


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5


def test_vec3_arithmetic():
    a, b = Vec3(1, 2, 3), Vec3(4, 5, 6)
    assert a + b == Vec3(5, 7, 9)
    assert b - a == Vec3(3, 3, 3)
    assert -a == Vec3(-1, -2, -3)
    assert 2 * a == a * 2 == Vec3(2, 4, 6)
    assert a.scaled(b) == Vec3(4, 10, 18)
    assert a.dot(b) == 32
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)
    assert Vec3(3, 4, 0).normalize().magnitude() == pytest.approx(1.0)


def test_transform_order_is_scale_rotate_translate():
    t = Transform3D(translation=Vec3(1, 0, 0), rotation=Vec3(0, math.pi / 2, 0),
                    scale=Vec3(2, 2, 2))
    assert t.apply(Vec3(1, 0, 0)).isclose(Vec3(1, 0, -2))


def test_rotation_order_x_then_z():
    # X first: (0,1,0) -> (0,0,1); Z then leaves it alone
    t = Transform3D(rotation=Vec3(math.pi / 2, 0, math.pi / 2))
    assert t.apply(Vec3(0, 1, 0)).isclose(Vec3(0, 0, 1))


def test_identity_leaves_vertices():
    verts = [Vec3(1, 2, 3), Vec3(-1, 0, 4)]
    assert Transform3D.IDENTITY.apply_to(verts) == verts


def test_rotate_ignores_translation():
    t = Transform3D(translation=Vec3(10, 10, 10), rotation=Vec3(0, 0, math.pi))
    assert t.rotate(Vec3(1, 0, 0)).isclose(Vec3(-1, 0, 0))


def test_composition_sums_and_scales():
    a = Transform3D(Vec3(1, 2, 3), Vec3(0.1, 0.2, 0.3), Vec3(2, 2, 2))
    b = Transform3D(Vec3(1, 1, 1), Vec3(0.1, 0.0, 0.0), Vec3(1, 3, 0.5))
    c = a * b
    assert c.translation == Vec3(2, 3, 4)
    assert c.rotation.isclose(Vec3(0.2, 0.2, 0.3))
    assert c.scale == Vec3(2, 6, 1)


def test_transforms_are_values():
    t = Transform3D()
    moved = t.with_translation(Vec3(0, 0, 5))
    assert t.translation == Vec3.ZERO
    assert moved.translation == Vec3(0, 0, 5)


def test_rotation_transpose_is_inverse():
    r = Mat4.rotation(Vec3(0.3, -1.1, 2.0))
    v = Vec3(1.5, -2.0, 0.25)
    assert (r.transposed() @ r).mul_vec3(v).isclose(v)
    assert (r @ v).magnitude() == pytest.approx(v.magnitude())
