from flatbox.geometry import Vector2
from flatbox.mathutils import (
    INF,
    clamp
)


def test_clamp_scalar():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25
    assert clamp(INF, 0.0, 1.0) == 1.0


def test_operators_do_not_mutate():
    a = Vector2(1, 2)
    b = Vector2(3, 5)

    assert a + b == Vector2(4, 7)
    assert b - a == Vector2(2, 3)
    assert a * 2 == Vector2(2, 4)
    assert b / 2 == Vector2(1.5, 2.5)
    assert -a == Vector2(-1, -2)
    assert a == Vector2(1, 2)
    assert b == Vector2(3, 5)


def test_combinators_allocate():
    a = Vector2(1, 2)
    b = Vector2(3, 5)

    total = Vector2.add_vectors(a, b)
    diff = Vector2.sub_vectors(b, a)

    assert total == Vector2(4, 7)
    assert diff == Vector2(2, 3)
    assert total is not a and total is not b
    assert diff is not a and diff is not b
    assert a == Vector2(1, 2)


def test_in_place_chaining():
    v = Vector2(1, 1)

    result = v.add(Vector2(1, 2)).sub(Vector2(0, 1)).add_scalar(1).multiply_scalar(2)

    assert result is v
    assert v == Vector2(6, 6)


def test_componentwise_min_max():
    v = Vector2(1, 5)
    assert v.min(Vector2(3, 2)) == Vector2(1, 2)

    v = Vector2(1, 5)
    assert v.max(Vector2(3, 2)) == Vector2(3, 5)


def test_clamp_vector():
    lo = Vector2(0, 0)
    hi = Vector2(1, 2)

    assert Vector2(-1, 3).clamp(lo, hi) == Vector2(0, 2)
    assert Vector2(0.5, 1).clamp(lo, hi) == Vector2(0.5, 1)
    assert Vector2(2, -2).clamp(lo, hi) == Vector2(1, 0)


def test_length_and_distance():
    assert Vector2(3, 4).length() == 5.0
    assert Vector2(3, 4).length_squared() == 25.0
    assert Vector2(1, 1).distance_to(Vector2(4, 5)) == 5.0
    assert Vector2(0, 0).normal() == Vector2(0, 0)
    assert Vector2(0, 2).normal() == Vector2(0, 1)


def test_copy_and_clone():
    source = Vector2(1, 2)

    target = Vector2().copy(source)
    twin = source.clone()
    source.set(7, 8)

    assert target == Vector2(1, 2)
    assert twin == Vector2(1, 2)


def test_equals_is_exact():
    assert Vector2(0.1, 0.2).equals(Vector2(0.1, 0.2))
    assert not Vector2(0.1, 0.2).equals(Vector2(0.1 + 1e-12, 0.2))
    assert Vector2(1, 2) != Vector2(1, 2.0000001)


def test_str():
    assert str(Vector2(1, -0.5)) == "<1.00; -0.50>"
