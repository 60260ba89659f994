import math

import numpy as np
import pytest

from geometrykernel.config import PRECISION
from geometrykernel.errors import VectorShapeError
from geometrykernel.model.geometry_primitives import Vector3


def test_default_is_zero_vector():
    v = Vector3()
    assert (v.x, v.y, v.z) == (0.0, 0.0, 0.0)


def test_components_and_setters():
    v = Vector3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)

    v.x = 7.0
    v.y = -8.0
    v.z = 9.5
    assert (v.x, v.y, v.z) == (7.0, -8.0, 9.5)


def test_magnitude():
    assert Vector3(3.0, 4.0, 0.0).magnitude == pytest.approx(5.0)
    assert Vector3().magnitude == 0.0


def test_normalize_unit_length():
    for v in (Vector3(1.0, 2.0, 2.0), Vector3(-1e-3, 5e-4, 2e-3), Vector3(1e8, -3e8, 2e7)):
        assert v.normalize().magnitude == pytest.approx(1.0, abs=1e-12)


def test_normalize_keeps_direction():
    n = Vector3(0.0, 0.0, -4.0).normalize()
    assert n == Vector3(0.0, 0.0, -1.0)


def test_normalize_zero_returns_zero():
    n = Vector3().normalize()
    assert n == Vector3()
    assert all(math.isfinite(c) for c in (n.x, n.y, n.z))


def test_normalize_below_precision_returns_zero():
    tiny = Vector3(PRECISION / 4, 0.0, 0.0)
    assert tiny.normalize() == Vector3()


def test_distance_to():
    assert Vector3(1.0, 1.0, 1.0).distance_to(Vector3(4.0, 5.0, 1.0)) == pytest.approx(5.0)


def test_arithmetic_returns_new_values():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)

    assert a + b == Vector3(5.0, 7.0, 9.0)
    assert b - a == Vector3(3.0, 3.0, 3.0)
    assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
    assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
    assert -a == Vector3(-1.0, -2.0, -3.0)

    # operands untouched
    assert (a.x, a.y, a.z) == (1.0, 2.0, 3.0)
    assert (b.x, b.y, b.z) == (4.0, 5.0, 6.0)


def test_dot_product():
    assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, -5.0, 6.0)) == pytest.approx(12.0)


def test_dot_is_symmetric_and_bilinear():
    a = Vector3(1.5, -2.0, 0.25)
    b = Vector3(-3.0, 4.0, 2.0)
    c = Vector3(0.5, 0.5, -1.0)

    assert a.dot(b) == b.dot(a)
    assert (a + c).dot(b) == pytest.approx(a.dot(b) + c.dot(b))
    assert (a * 3.0).dot(b) == pytest.approx(3.0 * a.dot(b))


def test_cross_product_of_axes():
    assert Vector3(1.0, 0.0, 0.0).cross(Vector3(0.0, 1.0, 0.0)) == Vector3(0.0, 0.0, 1.0)


def test_cross_is_anti_commutative_and_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    axb = a.cross(b)

    assert axb == -b.cross(a)
    assert axb.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert axb.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_equality_is_reflexive_and_symmetric():
    a = Vector3(0.1 + 0.2, 1.0, -3.0)
    b = Vector3(0.3, 1.0, -3.0)
    assert a == a
    assert (a == b) == (b == a)
    assert a == b


def test_equality_is_scale_relative():
    large = 2.0 ** 30
    ulp_at_large = large * PRECISION

    assert Vector3(large, 0.0, 0.0) == Vector3(large + ulp_at_large, 0.0, 0.0)
    # the same absolute difference is far outside tolerance near 1.0
    assert Vector3(1.0, 0.0, 0.0) != Vector3(1.0 + ulp_at_large, 0.0, 0.0)


def test_equality_boundary_at_epsilon():
    assert Vector3(1.0, 1.0, 1.0) == Vector3(1.0 + PRECISION, 1.0, 1.0)
    assert Vector3(1.0, 1.0, 1.0) != Vector3(1.0 + 2 * PRECISION, 1.0, 1.0)


def test_zero_is_not_equal_to_tiny_value():
    assert Vector3() != Vector3(1e-300, 0.0, 0.0)


def test_equality_with_other_types():
    assert Vector3(1.0, 2.0, 3.0) != (1.0, 2.0, 3.0)


def test_vector_is_unhashable():
    with pytest.raises(TypeError):
        hash(Vector3())


def test_is_close_with_custom_tolerance():
    assert Vector3(100.0, 0.0, 0.0).is_close(Vector3(100.1, 0.0, 0.0), rel_tol=1e-2)
    assert not Vector3(100.0, 0.0, 0.0).is_close(Vector3(100.1, 0.0, 0.0))


def test_copy_is_independent():
    a = Vector3(1.0, 2.0, 3.0)
    b = a.copy()
    b.x = 10.0
    assert a.x == 1.0


def test_array_conversion():
    arr = Vector3(1.0, -2.0, 3.5).to_array()
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [1.0, -2.0, 3.5])

    assert Vector3.from_array(np.array([4, 5, 6])) == Vector3(4.0, 5.0, 6.0)
    assert Vector3.from_array([0.5, 0.25, 0.125]) == Vector3(0.5, 0.25, 0.125)


@pytest.mark.parametrize("values", [[1.0, 2.0], [1.0, 2.0, 3.0, 4.0], [[1.0, 2.0, 3.0]]])
def test_from_array_rejects_wrong_shape(values):
    with pytest.raises(VectorShapeError):
        Vector3.from_array(values)


def test_str_representation():
    assert str(Vector3(1.0, 2.5, -3.0)) == "Vector3[1, 2.5, -3]"
