import pytest

from robotron.bullet import Bullet, erase_bullet
from robotron.geometry import Vec2


def test_defaults():
    bullet = Bullet()
    assert bullet.shape.size == Vec2(4.0, 50.0)
    assert bullet.shape.fill_color == "red"
    assert bullet.max_speed == 30.0


def test_move_uses_multiplier():
    bullet = Bullet()
    bullet.velocity = Vec2(1.0, 0.0)
    bullet.move(1.0)
    assert bullet.shape.position == Vec2(60.0, 0.0)


def test_move_zero_dt_stays():
    bullet = Bullet()
    bullet.velocity = Vec2(5.0, 5.0)
    bullet.move(0.0)
    assert bullet.shape.position == Vec2()


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Vec2(50, 50), False),
        (Vec2(5, 50), True),
        (Vec2(200, 50), True),
        (Vec2(50, 5), True),
        (Vec2(50, 200), True),
        (Vec2(110, 110), False),
    ],
)
def test_out_of_bounds(pos, expected):
    bullet = Bullet()
    bullet.shape.position = pos
    assert bullet.is_out_of_bounds(Vec2(100, 100), 10) is expected


def test_collider_bound_to_shape():
    bullet = Bullet()
    bullet.collider().move(2.0, 3.0)
    assert bullet.shape.position == Vec2(2.0, 3.0)


def test_erase_bullet_returns_copy():
    bullets = [Bullet(), Bullet(), Bullet()]
    remaining = erase_bullet(bullets, 1)
    assert remaining == [bullets[0], bullets[2]]
    assert len(bullets) == 3


def test_erase_bullet_bad_index():
    with pytest.raises(IndexError):
        erase_bullet([Bullet()], 4)