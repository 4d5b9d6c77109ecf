import math

import pytest

from robotron.geometry import Collision, RectShape, Vec2


def test_vector_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 7.25)
    assert (a + b) - b == a


def test_vector_scalar_multiply_and_divide_round_trip():
    a = Vec2(2.0, -6.0)
    assert (a * 4.0) / 4.0 == a
    assert 4.0 * a == a * 4.0


def test_length_of_three_four():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(-7.0, 2.5).normalized()
    assert v.length() == pytest.approx(1.0)
    assert math.atan2(v.y, v.x) == pytest.approx(math.atan2(2.5, -7.0))


def test_normalizing_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec2().normalized()


def test_shape_move_and_back():
    shape = RectShape(size=Vec2(10, 10), position=Vec2(5, 6))
    shape.move(Vec2(3, -4))
    shape.move(Vec2(-3, 4))
    assert shape.position == Vec2(5, 6)


def test_geometric_center_is_half_size():
    shape = RectShape(size=Vec2(40, 40))
    assert shape.geometric_center * 2 == shape.size


def test_collision_move_moves_body():
    shape = RectShape(size=Vec2(10, 10))
    collision = Collision(shape)
    collision.move(12.0, -3.0)
    assert shape.position == Vec2(12.0, -3.0)
    assert collision.position == shape.position


def test_half_size():
    shape = RectShape(size=Vec2(8, 20))
    assert Collision(shape).half_size * 2 == shape.size


def test_separated_shapes_report_true():
    a = RectShape(size=Vec2(10, 10), position=Vec2(0, 0))
    b = RectShape(size=Vec2(10, 10), position=Vec2(100, 0))
    assert Collision(a).check_collision(a, b) is True


def test_overlapping_shapes_report_false():
    a = RectShape(size=Vec2(10, 10), position=Vec2(0, 0))
    b = RectShape(size=Vec2(10, 10), position=Vec2(3, 3))
    assert Collision(a).check_collision(a, b) is False


def test_check_is_symmetric():
    a = RectShape(size=Vec2(10, 4), position=Vec2(0, 0))
    b = RectShape(size=Vec2(6, 6), position=Vec2(0, 40))
    c = Collision(a)
    assert c.check_collision(a, b) == c.check_collision(b, a)