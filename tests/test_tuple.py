"""Unit tests for the tuple module.

Tests cover:
- Point/vector tagging through the arithmetic operators
- Magnitude, normalization, dot and cross products
- Reflection about a normal
- Zero-magnitude normalization policy
"""

import math

import pytest

from src.phongtrace.core.tuple import (
    DegenerateVectorError,
    Tuple,
    point,
    reflect,
    vector,
)

SQRT2_2 = math.sqrt(2.0) / 2.0


class TestTupleKinds:
    """Tests for point/vector construction and tagging."""

    def test_point_has_w_one(self):
        """Test a tuple with w=1 is a point."""
        a = Tuple(4.3, -4.2, 3.1, 1.0)
        assert a.is_point()
        assert not a.is_vector()

    def test_vector_has_w_zero(self):
        """Test a tuple with w=0 is a vector."""
        a = Tuple(4.3, -4.2, 3.1, 0.0)
        assert a.is_vector()
        assert not a.is_point()

    def test_point_factory(self):
        """Test point() creates tuples with w=1."""
        assert point(4, -4, 3) == Tuple(4.0, -4.0, 3.0, 1.0)

    def test_vector_factory(self):
        """Test vector() creates tuples with w=0."""
        assert vector(4, -4, 3) == Tuple(4.0, -4.0, 3.0, 0.0)

    def test_to_vector_zeroes_w(self):
        """Test to_vector returns a copy with w forced to 0."""
        t = Tuple(1.0, 2.0, 3.0, 0.75)
        v = t.to_vector()
        assert v == vector(1.0, 2.0, 3.0)
        assert t.w == 0.75

    def test_tuples_are_immutable(self):
        """Test tuples cannot be modified in place."""
        p = point(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            p.x = 5.0  # type: ignore[misc]


class TestTupleArithmetic:
    """Tests for the arithmetic operators."""

    def test_point_plus_vector_is_point(self):
        """Test adding a vector to a point gives a point."""
        result = Tuple(3.0, -2.0, 5.0, 1.0) + Tuple(-2.0, 3.0, 1.0, 0.0)
        assert result == Tuple(1.0, 1.0, 6.0, 1.0)
        assert result.is_point()

    def test_adding_two_points_fails(self):
        """Test that points cannot be added."""
        with pytest.raises(TypeError):
            point(1.0, 2.0, 3.0) + point(1.0, 1.0, 1.0)

    def test_point_minus_point_is_vector(self):
        """Test subtracting two points gives the vector between them."""
        result = point(3.0, 2.0, 1.0) - point(5.0, 6.0, 7.0)
        assert result == vector(-2.0, -4.0, -6.0)

    def test_point_minus_vector_is_point(self):
        """Test subtracting a vector from a point gives a point."""
        result = point(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0)
        assert result == point(-2.0, -4.0, -6.0)

    def test_vector_minus_vector_is_vector(self):
        """Test subtracting two vectors gives a vector."""
        result = vector(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0)
        assert result == vector(-2.0, -4.0, -6.0)

    def test_negate(self):
        """Test negation flips every component."""
        assert -Tuple(1.0, -2.0, 3.0, -4.0) == Tuple(-1.0, 2.0, -3.0, 4.0)

    def test_scalar_multiply(self):
        """Test multiplication by a scalar from either side."""
        a = Tuple(1.0, -2.0, 3.0, -4.0)
        assert a * 3.5 == Tuple(3.5, -7.0, 10.5, -14.0)
        assert 0.5 * a == Tuple(0.5, -1.0, 1.5, -2.0)

    def test_scalar_divide(self):
        """Test division by a scalar."""
        assert Tuple(1.0, -2.0, 3.0, -4.0) / 2.0 == Tuple(0.5, -1.0, 1.5, -2.0)


class TestVectorOperations:
    """Tests for magnitude, normalize, dot, cross and reflect."""

    @pytest.mark.parametrize(
        "v, expected",
        [
            (vector(1.0, 0.0, 0.0), 1.0),
            (vector(0.0, 1.0, 0.0), 1.0),
            (vector(0.0, 0.0, 1.0), 1.0),
            (vector(1.0, 2.0, 3.0), math.sqrt(14.0)),
            (vector(-1.0, -2.0, -3.0), math.sqrt(14.0)),
        ],
    )
    def test_magnitude(self, v, expected):
        """Test magnitude is the Euclidean length."""
        assert v.magnitude() == pytest.approx(expected)

    def test_normalize_axis_vector(self):
        """Test normalizing an axis-aligned vector."""
        assert vector(4.0, 0.0, 0.0).normalize() == vector(1.0, 0.0, 0.0)

    def test_normalize_general_vector(self):
        """Test normalizing (1, 2, 3)."""
        root = math.sqrt(14.0)
        result = vector(1.0, 2.0, 3.0).normalize()
        assert result.approx_eq(vector(1.0 / root, 2.0 / root, 3.0 / root))

    @pytest.mark.parametrize(
        "v",
        [
            vector(1.0, 2.0, 3.0),
            vector(-0.001, 0.0, 0.002),
            vector(1e6, -3e5, 42.0),
        ],
    )
    def test_normalize_gives_unit_length_and_is_idempotent(self, v):
        """Test normalized vectors have magnitude 1 and renormalize to themselves."""
        n = v.normalize()
        assert n.magnitude() == pytest.approx(1.0)
        assert n.normalize().approx_eq(n)

    def test_normalize_zero_vector_raises(self):
        """Test normalizing a zero-magnitude vector is rejected."""
        with pytest.raises(DegenerateVectorError):
            vector(0.0, 0.0, 0.0).normalize()

    def test_degenerate_vector_error_is_value_error(self):
        """Test the degenerate-vector error can be caught as ValueError."""
        with pytest.raises(ValueError):
            vector(0.0, 0.0, 0.0).normalize()

    def test_dot(self):
        """Test dot product of two vectors."""
        assert vector(1.0, 2.0, 3.0).dot(vector(2.0, 3.0, 4.0)) == 20.0

    def test_cross(self):
        """Test cross product and its anticommutativity."""
        a = vector(1.0, 2.0, 3.0)
        b = vector(2.0, 3.0, 4.0)
        assert a.cross(b) == vector(-1.0, 2.0, -1.0)
        assert b.cross(a) == vector(1.0, -2.0, 1.0)

    def test_reflect_at_45_degrees(self):
        """Test reflecting a vector approaching at 45 degrees."""
        result = reflect(vector(1.0, -1.0, 0.0), vector(0.0, 1.0, 0.0))
        assert result == vector(1.0, 1.0, 0.0)

    def test_reflect_off_slanted_surface(self):
        """Test reflecting a vector off a slanted normal."""
        result = reflect(vector(0.0, -1.0, 0.0), vector(SQRT2_2, SQRT2_2, 0.0))
        assert result.approx_eq(vector(1.0, 0.0, 0.0))
