"""Tests for the 2D vector type."""

import pytest

from bugworld.simulation.vector import UNIT_X, ZERO, Vector


def test_arithmetic():
    a = Vector(1.0, 2.0)
    b = Vector(3.0, -1.0)

    assert a + b == Vector(4.0, 1.0)
    assert b - a == Vector(2.0, -3.0)
    assert a * 2 == Vector(2.0, 4.0)
    assert 2 * a == Vector(2.0, 4.0)


def test_length_and_distance():
    assert Vector(3.0, 4.0).length == 5.0
    assert Vector(1.0, 1.0).distance_to(Vector(4.0, 5.0)) == 5.0
    assert ZERO.length == 0.0


def test_normalized():
    unit = Vector(3.0, 4.0).normalized()

    assert unit is not None
    assert unit.x == pytest.approx(0.6)
    assert unit.y == pytest.approx(0.8)
    assert UNIT_X.normalized() == UNIT_X


def test_zero_vector_has_no_direction():
    assert ZERO.normalized() is None
    assert (Vector(2.0, 2.0) - Vector(2.0, 2.0)).normalized() is None


def test_vectors_are_immutable():
    with pytest.raises(AttributeError):
        UNIT_X.x = 2.0  # type: ignore[misc]
