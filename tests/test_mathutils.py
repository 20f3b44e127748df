import math

import numpy as np
import pytest

from fjetsim import mathutils as mu


def test_quarter_turn_with_source_pi_constant():
    q = mu.quat_from_axis_angle(mu.PI_2, mu.vec3(0.0, 1.0, 0.0))
    rotated = mu.quat_rotate(q, mu.vec3(1.0, 0.0, 0.0))
    assert np.allclose(rotated, [0.0, 0.0, -1.0], atol=1e-6)
    half = mu.quat_from_axis_angle(mu.PI_6 * 3, mu.vec3(0.0, 1.0, 0.0))
    assert np.allclose(half, q)


def test_normalize_gives_unit_length():
    v = mu.normalize([3.0, -4.0, 12.0])
    assert np.linalg.norm(v) == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        mu.normalize([0.0, 0.0, 0.0])


def test_identity_quat_leaves_vectors_alone():
    v = mu.vec3(1.5, -2.0, 0.25)
    assert np.allclose(mu.quat_rotate(mu.quat_identity(), v), v)


def test_multiply_by_identity_is_noop():
    q = mu.quat_from_axis_angle(0.7, mu.normalize([1.0, 2.0, 3.0]))
    assert np.allclose(mu.quat_multiply(mu.quat_identity(), q), q)
    assert np.allclose(mu.quat_multiply(q, mu.quat_identity()), q)


def test_rotation_preserves_length():
    q = mu.quat_from_axis_angle(1.3, mu.normalize([0.2, -1.0, 0.5]))
    v = mu.vec3(3.0, 1.0, -2.0)
    assert np.linalg.norm(mu.quat_rotate(q, v)) == pytest.approx(np.linalg.norm(v))


def test_conjugate_undoes_rotation():
    q = mu.quat_from_axis_angle(2.1, mu.normalize([1.0, 1.0, 0.0]))
    v = mu.vec3(0.3, 0.9, -1.1)
    back = mu.quat_rotate(mu.quat_conjugate(q), mu.quat_rotate(q, v))
    assert np.allclose(back, v)


def test_product_composes_rotations():
    a = mu.quat_from_axis_angle(0.4, mu.normalize([0.0, 1.0, 0.0]))
    b = mu.quat_from_axis_angle(-1.1, mu.normalize([1.0, 0.0, 1.0]))
    v = mu.vec3(1.0, 2.0, 3.0)
    combined = mu.quat_rotate(mu.quat_multiply(a, b), v)
    assert np.allclose(combined, mu.quat_rotate(a, mu.quat_rotate(b, v)))


def test_quat_matrix_agrees_with_rotate():
    q = mu.quat_from_axis_angle(0.9, mu.normalize([-1.0, 0.5, 2.0]))
    v = mu.vec3(-0.5, 4.0, 1.0)
    assert np.allclose(mu.quat_to_mat3(q) @ v, mu.quat_rotate(q, v))
    m4 = mu.quat_to_mat4(q)
    assert np.allclose(m4[:3, :3], mu.quat_to_mat3(q))
    assert np.allclose(m4[3], [0.0, 0.0, 0.0, 1.0])


def test_rotation_matrix_matches_quaternion():
    axis = [0.3, -2.0, 1.0]
    angle = 1.7
    q = mu.quat_from_axis_angle(angle, mu.normalize(axis))
    assert np.allclose(mu.rotation_matrix(angle, axis)[:3, :3], mu.quat_to_mat3(q))


def test_quat_normalize_unit_and_zero():
    q = mu.quat_normalize([2.0, 1.0, -1.0, 3.0])
    assert np.linalg.norm(q) == pytest.approx(1.0)
    assert np.allclose(mu.quat_normalize([0.0, 0.0, 0.0, 0.0]), mu.quat_identity())


def test_translation_matrix_moves_point():
    offset = mu.vec3(1.0, -2.0, 5.0)
    p = mu.vec3(3.0, 3.0, 3.0)
    out = mu.translation_matrix(offset) @ np.append(p, 1.0)
    assert np.allclose(out[:3], p + offset)


def test_scale_matrix_scalar_and_vector():
    assert np.allclose(mu.scale_matrix(2.0), mu.scale_matrix([2.0, 2.0, 2.0]))
    assert np.allclose(np.diag(mu.scale_matrix([1.0, 2.0, 3.0]))[:3], [1.0, 2.0, 3.0])


def test_scale_matrix_bad_shape():
    with pytest.raises(ValueError):
        mu.scale_matrix([1.0, 2.0])


def test_perspective_maps_near_and_far_to_ndc_bounds():
    near, far = 0.1, 100.0
    proj = mu.perspective(math.radians(45.0), 1.5, near, far)
    clip_near = proj @ np.array([0.0, 0.0, -near, 1.0])
    clip_far = proj @ np.array([0.0, 0.0, -far, 1.0])
    assert clip_near[2] / clip_near[3] == pytest.approx(-1.0)
    assert clip_far[2] / clip_far[3] == pytest.approx(1.0)


def test_perspective_rejects_degenerate_input():
    with pytest.raises(ValueError):
        mu.perspective(1.0, 0.0, 0.1, 10.0)
    with pytest.raises(ValueError):
        mu.perspective(1.0, 1.0, 5.0, 5.0)


def test_look_at_puts_eye_at_origin_and_target_ahead():
    eye = mu.vec3(4.0, 2.0, -3.0)
    center = mu.vec3(-1.0, 0.5, 2.0)
    view = mu.look_at(eye, center, [0.0, 1.0, 0.0])
    assert np.allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])
    target = view @ np.append(center, 1.0)
    assert np.allclose(target[:2], [0.0, 0.0])
    assert -target[2] == pytest.approx(np.linalg.norm(center - eye))