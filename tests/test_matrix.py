import math

import pytest

from vgengine.camera import Camera
from vgengine.matrix import (
    Matrix4,
    compose,
    model_matrix,
    mvp_matrix,
    perspective_matrix,
    view_matrix,
)
from vgengine.quaternion import Quaternion
from vgengine.transform import Transform
from vgengine.vector import Vector3, Vector4, forward


def flat(m):
    return [c for row in m for c in row]


def sample():
    return Matrix4.from_rows(
        Vector4(1, 2, 3, 4),
        Vector4(5, 6, 7, 8),
        Vector4(9, 10, 11, 12),
        Vector4(13, 14, 15, 16),
    )


def test_identity_is_neutral():
    m = sample()
    assert Matrix4.identity() @ m == m
    assert m @ Matrix4.identity() == m


def test_getitem_row_and_element():
    m = sample()
    assert m[1] == Vector4(5, 6, 7, 8)
    assert m[2, 3] == 12


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4(((1, 2, 3), (1, 2, 3), (1, 2, 3)))


def test_transpose_swaps_and_round_trips():
    m = sample()
    t = m.transposed()
    assert t[0, 3] == m[3, 0]
    assert t.transposed() == m


def test_translation_moves_point():
    p = Vector3(1.0, 2.0, 3.0)
    offset = Vector3(-4.0, 0.5, 2.0)
    moved = Matrix4.translation(offset).mul_vector3(p)
    assert list(moved) == pytest.approx([-3.0, 2.5, 5.0], abs=1e-9)


def test_scaling_matches_hadamard():
    s = Vector3(2.0, 3.0, 4.0)
    p = Vector3(1.0, -1.0, 0.5)
    scaled = Matrix4.scaling(s).mul_vector3(p)
    assert list(scaled) == pytest.approx([2.0, -3.0, 2.0], abs=1e-9)


def test_rotation_z_quarter_turn():
    r = Matrix4.rotation_z(math.pi / 2).mul_vector3(Vector3(1.0, 0.0, 0.0))
    assert list(r) == pytest.approx([0.0, 1.0, 0.0], abs=1e-9)


@pytest.mark.parametrize(
    "axis, factory",
    [
        (Vector3(1.0, 0.0, 0.0), Matrix4.rotation_x),
        (Vector3(0.0, 1.0, 0.0), Matrix4.rotation_y),
        (Vector3(0.0, 0.0, 1.0), Matrix4.rotation_z),
    ],
)
def test_quaternion_matrix_matches_axis_rotation(axis, factory):
    angle = 0.7
    q = Quaternion.from_axis(axis, angle)
    assert flat(Matrix4.from_quaternion(q)) == pytest.approx(flat(factory(angle)))


def test_quaternion_matrix_agrees_with_rotate():
    q = Quaternion.from_euler(0.3, -0.8, 1.1).normalized()
    v = Vector3(0.4, -2.0, 1.5)
    rotated = Matrix4.from_quaternion(q).mul_vector3(v)
    assert list(rotated) == pytest.approx(list(q.rotate(v)), abs=1e-9)


def test_identity_quaternion_gives_identity():
    assert Matrix4.from_quaternion(Quaternion.identity()) == Matrix4.identity()


def test_mul_vector4_ignores_input_w():
    m = Matrix4.translation(Vector3(1.0, 2.0, 3.0))
    a = m.mul_vector4(Vector4(1.0, 1.0, 1.0, 1.0))
    b = m.mul_vector4(Vector4(1.0, 1.0, 1.0, 7.0))
    assert a == b
    assert a.xyz() == m.mul_vector3(Vector3(1.0, 1.0, 1.0))


def test_compose_is_left_to_right():
    a = Matrix4.rotation_x(0.4)
    b = Matrix4.translation(Vector3(1.0, 0.0, 0.0))
    c = Matrix4.scaling(Vector3(2.0, 2.0, 2.0))
    assert compose(a, b, c) == (a @ b) @ c
    assert compose(a, b) == a @ b


def test_compose_needs_two():
    with pytest.raises(ValueError):
        compose(Matrix4.identity())


def test_model_matrix_identity_transform():
    assert model_matrix(Transform.identity()) == Matrix4.identity()


def test_model_matrix_places_origin_at_position():
    t = Transform(Vector3(3.0, -1.0, 2.0), Quaternion.from_euler(0.2, 0.1, 0.5), Vector3(2.0, 2.0, 2.0))
    origin = model_matrix(t).mul_vector3(Vector3())
    assert list(origin) == pytest.approx([3.0, -1.0, 2.0], abs=1e-9)


def test_model_matrix_rotates():
    q = Quaternion.from_axis(Vector3(0.0, 1.0, 0.0), 1.2)
    t = Transform(orientation=q)
    v = Vector3(1.0, 0.5, -0.25)
    rotated = model_matrix(t).mul_vector3(v)
    assert list(rotated) == pytest.approx(list(q.rotate(v)), abs=1e-9)


def test_view_matrix_of_default_camera_is_identity():
    assert flat(view_matrix(Camera.default())) == pytest.approx(flat(Matrix4.identity()))


def test_view_matrix_maps_camera_to_origin_and_look_to_forward():
    q = Quaternion.from_axis(Vector3(0.0, 1.0, 0.0), 0.9)
    cam = Camera(position=Vector3(1.0, 2.0, 3.0), orientation=q)
    view = view_matrix(cam)
    assert list(view.mul_vector3(cam.position)) == pytest.approx([0.0, 0.0, 0.0], abs=1e-9)
    looked_at = cam.position + q.rotate(forward())
    assert list(view.mul_vector3(looked_at)) == pytest.approx([0.0, 0.0, -1.0], abs=1e-9)


def test_perspective_maps_near_and_far_planes():
    cam = Camera.default()
    proj = perspective_matrix(cam, 16 / 9)
    near = proj.mul_vector4(Vector4(0.0, 0.0, -cam.z_near, 1.0))
    far = proj.mul_vector4(Vector4(0.0, 0.0, -cam.z_far, 1.0))
    assert near.z / near.w == pytest.approx(-1.0)
    assert far.z / far.w == pytest.approx(1.0)
    assert proj[2, 3] == -1.0
    assert proj[3, 3] == 0.0


def test_perspective_aspect_ratio_scales_x_only():
    cam = Camera.default()
    wide = perspective_matrix(cam, 2.0)
    square = perspective_matrix(cam, 1.0)
    assert wide[0, 0] == pytest.approx(square[0, 0] / 2.0)
    assert wide[1, 1] == pytest.approx(square[1, 1])


def test_mvp_with_identities_is_projection():
    proj = perspective_matrix(Camera.default())
    result = mvp_matrix(Transform.identity(), Matrix4.identity(), proj)
    assert flat(result) == pytest.approx(flat(proj))