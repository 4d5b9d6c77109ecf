import random

import pytest

from robotron.family import Daddy, Family
from robotron.geometry import Vec2


def spawned(family, pos=Vec2(500, 500), bounds=Vec2(1000, 1000)):
    family.spawn(pos, bounds, None)
    return family


def test_family_defaults():
    family = Family()
    assert family.is_family is True
    assert family.max_speed == 2.0
    assert family.family_movement_offset == 8.0
    assert family.shape.outline_color == "black"


def test_spawn_picks_target_inside_bounds():
    for seed in range(20):
        family = Family(random.Random(seed))
        family.bounds_offset = 15
        spawned(family, bounds=Vec2(300, 200))
        assert 15 <= family.seek_target.x < 315
        assert 15 <= family.seek_target.y < 215


def test_spawn_with_empty_bounds_raises():
    with pytest.raises(ValueError):
        Family(random.Random(0)).spawn(Vec2(1, 1), Vec2(0, 0), None)


def test_move_approaches_target():
    family = spawned(Family(random.Random(3)))
    family.family_movement_offset = 0.0
    family.seek_target = Vec2(100, 900)
    before = (family.seek_target - family.position).length()
    family.move_toward(Vec2(), 0.01)
    after = (family.seek_target - family.position).length()
    assert after < before
    assert family.shape.position == family.position


def test_no_move_before_timer():
    family = spawned(Family(random.Random(3)))
    family.seek_target = Vec2(100, 900)
    family.move_toward(Vec2(), 0.01)
    assert family.position == Vec2(500, 500)


def test_reaching_target_chooses_new_one_in_bounds():
    family = spawned(Family(random.Random(7)), bounds=Vec2(400, 400))
    family.seek_target = Vec2(505, 50)
    family.move_toward(Vec2(), 0.01)
    assert 0 <= family.seek_target.x < 400
    assert 0 <= family.seek_target.y < 400
    assert family.is_target_reached is False


def test_daddy_attributes():
    daddy = Daddy(0.5, (90, 120))
    assert daddy.name == "Daddy"
    assert daddy.max_speed == 15.0
    assert daddy.family_movement_offset == pytest.approx(0.5 * 8)
    assert daddy.shape.texture_rect == daddy.family_animation.uv_rect


def test_daddy_moving_down_uses_row_two():
    daddy = spawned(Daddy(0.01, (90, 120), random.Random(1)), pos=Vec2(100, 100))
    daddy.family_movement_offset = 0.0
    daddy.seek_target = Vec2(500, 900)
    daddy.move_toward(Vec2(), 0.05)
    anim = daddy.family_animation
    assert anim.uv_rect.top == 2 * anim.uv_height
    assert daddy.shape.texture_rect == anim.uv_rect