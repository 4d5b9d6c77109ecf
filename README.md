# robotron

The frame-by-frame game logic of an arena shooter, with no rendering or audio
backend. It models what moves around the arena and how it behaves each frame.
It uses only the standard library.

## Modules

- `robotron.geometry`: the immutable `Vec2` (with `length()` and
  `normalized()`, which raises `ValueError` for a zero vector), `RectShape`
  (size, position, origin, colours, a texture path and texture rectangle) and
  `Collision`. `Collision.check_collision(this_shape, other)` compares two
  centred rectangles and returns `True` when they lie more than one unit apart
  on either axis, `False` when they overlap or touch.
- `robotron.animation`: `Animation(texture_size, image_count, switch_time)`
  steps through the columns of one row of a sprite sheet. `update(row, dt,
  is_looping)` moves to the next frame once `switch_time` has built up and
  exposes the current frame as the `IntRect` in `uv_rect`. Without looping it
  stays on the last column.
- `robotron.bullet`: the player's `Bullet` (`move(dt)`,
  `is_out_of_bounds(bounds, offset)`, `collider()`) and
  `erase_bullet(bullets, index)`, which returns a copy of the list without one
  bullet and raises `IndexError` for a bad index.
- `robotron.enemy`: the `Enemy` base class and the `SoundPlayer` protocol, any
  object with a `play_sound(index)` method.
- `robotron.family`: `Family`, a wandering human that picks random
  destinations, and `Daddy`.
- `robotron.enemies`: `Grunt`, which steps straight at its target; `Hulk`, an
  immortal enemy that wanders between random points; and `Electrode`, a
  stationary hazard.
- `robotron.brain`: `Brain`, which chases a randomly chosen family member
  while any remain and otherwise heads for the target it is given.
- `robotron.enforcer`: `Enforcer`, which waits 1.5 seconds, then closes on its
  target, backs off inside a radius around it, stays inside the arena and
  fires at regular intervals through an `EnemyBulletManager`.
- `robotron.enemy_bullet`: `EnemyBullet` with bounds checks that record the
  crossed edge as an `OOBSide`, bounce counting (`update_bounce`,
  `invert_momentum`), and `EnforcerBullet`, which locks onto the first target
  it is given and then flies straight.
- `robotron.bullet_manager`: `EnemyBulletManager`, which creates enemy bullets
  by shooter name and holds the live ones.
- `robotron.highscore`: `HighscoreMenu`, the three lines of text of the score
  screen.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it

Each enemy is placed in the arena with `spawn(position, bounds,
sound_manager)`; the sound manager may be `None`. After that,
`move_toward(target, dt)` is called once per frame with the player's position
and the frame time.

```python
from robotron.geometry import Vec2
from robotron.enemies import Grunt

class Silent:
    def play_sound(self, index):
        pass

dt = 1 / 60
grunt = Grunt(dt)
grunt.spawn(Vec2(100, 100), Vec2(800, 600), Silent())
for _ in range(60):
    grunt.move_toward(Vec2(400, 300), dt)
print(grunt.position)
```

Enemies that pick random destinations (`Family`, `Daddy`, `Hulk`, `Brain`)
take an optional `rng`, a `random.Random`, so their movement can be made
repeatable. A `Brain` is also given the family members to hunt:
`spawn(position, bounds, sound_manager, families)`, then
`update_families(...)` and `check_if_target_died(family)` as the family
changes.

Enemies that fire, such as the `Enforcer`, put their shots in an
`EnemyBulletManager`. Set its arena with `configure(bounds_offset, bounds)`
first. `spawn(enemy_name, target_location, dt)` creates a bullet for a known
shooter name and returns it, or returns `None` for an unknown one; out of the
box only `"Enforcer"` is known, and more can be added by passing a mapping of
name to bullet factory to the constructor. `bullets` gives a copy of the live
bullets, `delete(index)` removes one and `clear()` removes them all. Each
bullet is moved with `move_toward` and checked with `is_out_of_bounds`.

`HighscoreMenu(width, height)` lays out its text items;
`pass_score(current_score, high_score)` updates them and `draw(window)` hands
each one to any object with a `draw(item)` method.

## What it does not do

This package holds the game rules only. It opens no window, loads no images,
fonts or sounds, and has no main loop or command to start a game. Sprite
sheets are only recorded as paths on each shape; their pixel sizes are passed
in as `texture_size`. It does not build waves of enemies, and it does not
store high scores: the menu only shows the numbers it is given.