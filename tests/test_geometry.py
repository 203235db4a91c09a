import pytest

from fsbkin.geometry import (
    Inertia,
    MotionVector,
    Quaternion,
    TrajState,
    TrajState3,
    Transform,
    Vec3,
    ezyx_to_quat,
    inertia_is_positive_definite,
    quat_identity,
    quat_norm,
    quat_normalize,
    transform_identity,
    vector_abs,
    vector_add,
    vector_cross,
    vector_dot,
    vector_norm,
    vector_scale,
    vector_subtract,
)


def _approx(value):
    return pytest.approx(value, rel=1e-12, abs=1e-12)


VEC_A = Vec3(0.12, -0.45, 1.3)
VEC_B = Vec3(-0.45, 0.03, 0.98)


def _assert_vec(actual, expected):
    assert actual.x == _approx(expected.x)
    assert actual.y == _approx(expected.y)
    assert actual.z == _approx(expected.z)


def test_transform_identity():
    tr = transform_identity()
    assert quat_norm(tr.rotation) == _approx(1.0)
    assert tr.rotation == Quaternion(1.0, 0.0, 0.0, 0.0)
    assert tr.translation == Vec3(0.0, 0.0, 0.0)
    assert Transform() == tr


def test_vector_add():
    _assert_vec(vector_add(VEC_A, VEC_B), Vec3(-0.33, -0.42, 2.28))


def test_vector_subtract():
    _assert_vec(vector_subtract(VEC_A, VEC_B), Vec3(0.57, -0.48, 0.32))


def test_vector_cross():
    _assert_vec(vector_cross(VEC_A, VEC_B), Vec3(-0.48, -0.7026, -0.1989))


def test_vector_dot():
    assert vector_dot(VEC_A, VEC_B) == _approx(1.2065)


def test_cross_is_orthogonal_to_inputs():
    cross = vector_cross(VEC_A, VEC_B)
    assert vector_dot(cross, VEC_A) == _approx(0.0)
    assert vector_dot(cross, VEC_B) == _approx(0.0)


def test_scale_norm_and_abs():
    unit = vector_scale(1.0 / vector_norm(VEC_A), VEC_A)
    assert vector_norm(unit) == _approx(1.0)
    absolute = vector_abs(VEC_A)
    assert absolute == Vec3(0.12, 0.45, 1.3)
    assert vector_norm(absolute) == _approx(vector_norm(VEC_A))


def test_quat_identity_has_unit_norm():
    assert quat_identity() == Quaternion()
    assert quat_norm(quat_identity()) == 1.0


def test_quat_normalize():
    quat = quat_normalize(Quaternion(0.10, -0.5, 0.121, 0.0))
    assert quat.qw == _approx(0.19081711005660068)
    assert quat.qx == _approx(-0.9540855502830033)
    assert quat.qy == _approx(0.2308887031684868)
    assert quat.qz == _approx(0.0)
    assert quat_norm(quat) == _approx(1.0)


def test_quat_normalize_zero_is_unchanged():
    zero = Quaternion(0.0, 0.0, 0.0, 0.0)
    assert quat_normalize(zero) == zero


def test_ezyx_to_quat_from_rpy():
    quat = ezyx_to_quat(Vec3(0.121, -0.5, 0.10))
    assert quat.qw == _approx(0.9651834299409254)
    assert quat.qx == _approx(0.06327695587919153)
    assert quat.qy == _approx(-0.24371474027338194)
    assert quat.qz == _approx(0.07085265552970922)
    assert quat_norm(quat) == _approx(1.0)


def test_ezyx_zero_is_identity():
    assert ezyx_to_quat(Vec3()) == quat_identity()


@pytest.mark.parametrize(
    ("inertia", "expected"),
    [
        (Inertia(1.0, 2.0, 3.0, 0.0, 0.0, 0.0), True),
        (Inertia(1.0, 2.0, 3.0, 0.1, 0.2, 0.3), True),
        (Inertia(1.0, 2.0, 3.0, 4.0, 5.0, 6.0), False),
        (Inertia(1.0, -1.0, -1.0, 0.0, 0.0, 0.0), False),
        (Inertia(), False),
    ],
)
def test_inertia_positive_definite(inertia, expected):
    assert inertia_is_positive_definite(inertia) is expected


def test_defaults_are_zero():
    assert MotionVector() == MotionVector(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 0.0))
    assert TrajState() == TrajState(0.0, 0.0, 0.0, 0.0)
    assert TrajState3().jerk == Vec3(0.0, 0.0, 0.0)