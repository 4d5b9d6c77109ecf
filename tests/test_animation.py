import pytest

from robotron.animation import Animation, IntRect


def make():
    return Animation((90, 120), (3, 4), 1.0)


def test_initial_rect_is_first_frame():
    anim = make()
    assert anim.uv_rect.left == 0
    assert anim.uv_rect.top == 0
    assert anim.uv_rect.width * 3 == 90
    assert anim.uv_rect.height * 4 == 120


def test_no_advance_before_switch_time():
    anim = make()
    before = anim.uv_rect
    anim.update(2, 0.5, True)
    assert anim.uv_rect == before
    assert anim.current_row == 2


def test_advance_selects_row_and_next_column():
    anim = make()
    anim.update(2, 1.0, True)
    assert anim.uv_rect == IntRect(
        anim.uv_width, 2 * anim.uv_height, anim.uv_width, anim.uv_height
    )


def test_leftover_time_is_kept():
    anim = make()
    anim.update(0, 1.25, True)
    assert anim.total_time == pytest.approx(0.25)


def test_looping_wraps_to_first_column():
    anim = make()
    for _ in range(3):
        anim.update(0, 1.0, True)
    assert anim.current_column == 0
    assert anim.uv_rect.left == 0


def test_non_looping_holds_last_column():
    anim = make()
    for _ in range(5):
        anim.update(1, 1.0, False)
    assert anim.current_column == anim.image_count[0] - 1
    assert anim.uv_rect.left == anim.uv_width * (anim.image_count[0] - 1)


def test_zero_image_count_rejected():
    with pytest.raises(ValueError):
        Animation((10, 10), (0, 1), 1.0)