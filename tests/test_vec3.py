import math

import pytest

from raycfg.vec3 import (
    Vec3,
    cross,
    dot,
    random_double,
    random_vec3,
    reflect,
    refract,
    schlick,
    unit_vector,
)

A = Vec3(1.0, 2.0, 3.0)
B = Vec3(-4.0, 0.5, 2.0)


def _close(u, v, tol=1e-9):
    return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(u, v))


def test_components_and_aliases():
    assert (A.x, A.y, A.z) == (1.0, 2.0, 3.0)
    assert (A.r, A.g, A.b) == (A.x, A.y, A.z)
    assert list(A) == [A[0], A[1], A[2]]
    assert len(A) == 3


def test_index_out_of_range():
    assert A[2] == 3.0
    with pytest.raises(IndexError):
        A[3]


def test_add_sub_round_trip():
    assert (A + B) - B == A
    assert A + B == B + A
    assert -A + A == Vec3()
    assert +A == A


def test_scalar_multiplication_and_division():
    assert A * 2 == A + A
    assert 2 * A == A * 2
    assert _close((A * 4.0) / 4.0, A)


def test_componentwise_multiplication_and_division():
    assert _close((A * B) / B, A)
    assert A * Vec3(1, 1, 1) == A


def test_unsupported_operand():
    assert A + Vec3() == A
    with pytest.raises(TypeError):
        A + 1


def test_length_and_length_squared():
    assert math.isclose(A.length() ** 2, A.length_squared())
    assert math.isclose(dot(A, A), A.length_squared())


def test_near_zero():
    assert Vec3(1e-9, -1e-9, 0).near_zero()
    assert not Vec3(1e-7, 0, 0).near_zero()


def test_normalized():
    assert math.isclose(B.normalized().length(), 1.0)
    assert Vec3().normalized() == Vec3()


def test_str_format():
    assert str(Vec3(1, 2.5, -3)) == "1 2.5 -3"


def test_cross_is_orthogonal():
    c = cross(A, B)
    assert math.isclose(dot(c, A), 0.0, abs_tol=1e-9)
    assert math.isclose(dot(c, B), 0.0, abs_tol=1e-9)
    assert cross(A, A) == Vec3()


def test_cross_of_axes():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_unit_vector():
    assert math.isclose(unit_vector(A).length(), 1.0)
    with pytest.raises(ZeroDivisionError):
        unit_vector(Vec3())


def test_reflect_keeps_length_and_flips_normal_component():
    n = Vec3(0, 0, 1)
    r = reflect(A, n)
    assert math.isclose(r.length(), A.length())
    assert math.isclose(dot(r, n), -dot(A, n))


def test_refract_normal_incidence_passes_straight():
    out = refract(Vec3(0, 0, -2), Vec3(0, 0, 1), 1.0 / 1.5)
    assert tuple(out) == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)


def test_refract_result_is_unit_length():
    out = refract(Vec3(1, 0, -1), Vec3(0, 0, 1), 1.0 / 1.5)
    assert out is not None
    assert math.isclose(out.length(), 1.0)


def test_refract_total_internal_reflection():
    assert refract(Vec3(1, 0, -0.1), Vec3(0, 0, 1), 1.5) is None


def test_schlick_limits():
    assert math.isclose(schlick(0.0, 1.5), 1.0)
    assert math.isclose(schlick(1.0, 1.0), 0.0)


def test_random_double_range():
    for _ in range(200):
        assert -2.0 <= random_double(-2.0, 3.0) < 3.0
        assert 0.0 <= random_double() < 1.0
    assert random_double(4.0, 4.0) == 4.0


def test_random_vec3_range():
    for _ in range(100):
        v = random_vec3(-1.0, 1.0)
        assert all(-1.0 <= c < 1.0 for c in v)