# orbitinvaders

Building blocks for a small 2D arcade game, in plain Python with no
dependencies outside the standard library. The package holds the maths,
collision, animation, particle, input, camera, text-layout and save-file
code. None of it is tied to a window or a renderer: drawing code is handed
plain data, such as rectangles, vertex batches, positioned text segments
and debug shapes.

## Modules

- `orbitinvaders.angles`: `TAU`, `PI`, `degs_to_rads`, `rads_to_degs`,
  `wrap_degs` and `wrap_rads`.
- `orbitinvaders.mathutil`: clamping (`clamp`, `clamp_min`, `clamp_max`),
  `lerp`, `remap`, `smooth_damp`, rounding helpers, `average`,
  `standard_deviation`, `sort_two` (returns a `Range`), `each_period` and
  formatting with `format_fixed` and `to_hex`.
- `orbitinvaders.vec`: immutable 2D vectors (`Vec`), integer vectors
  (`VecI`) and positions with a rotation (`Transform`). It also has
  `distance`, `distance_sq`, `wrap_around`, `is_second_in_fov_of_first`,
  `line_intersection` and `lerp_vec`.
- `orbitinvaders.bounds`: `Rect`, axis-aligned `BoxBounds` and
  `CircleBounds`, with containment, closest-point and distance queries.
- `orbitinvaders.matrix2d`: 3×3 affine `Matrix` and the helpers
  `point_to_world_space`, `vector_to_world_space`, `point_to_local_space`
  and `vector_to_local_space`.
- `orbitinvaders.entity`: `Entity`, `BoxEntity` and `CircleEntity`.
- `orbitinvaders.collide`: `collide` for any pair of shapes or entities.
  For groups there are `colliding_pairs`, `colliding_pairs_within` and
  `self_collide`.
- `orbitinvaders.rand`: quick rolls on a shared generator (`roll`,
  `roll_float`, `once_every`, `percent_chance`, `dir_in_circle`,
  `pos_inside_circle`, `vec_in_range`, `vec_in_bounds`). `Dice` is a
  seedable generator with coin flips, dice rolls and gaussian values.
- `orbitinvaders.animation`: `AnimationFrame` and `SheetFrameCalculator`
  for grid sprite sheets. `Animation` plays frames forwards or backwards,
  looping or once. Also `total_duration`, `total_duration_for_frames` and
  `rect_at_time`.
- `orbitinvaders.partsys`: `ParticleSystem` and `Particle`. The system
  spawns, moves and expires particles, and `render_items()` yields what is
  needed to draw each one.
- `orbitinvaders.savestate`: `SaveState` stores key/value entries for a save
  slot in a text file, one entry per line. `SaveStream` is a context
  manager that collects values under one key.
- `orbitinvaders.raw_input`: `Keyboard`, `Mouse` and `GamePads` state fed
  from outside, with per-frame pressed, just-pressed, released and
  just-released checks. `KeyState` and `next_key_state` track those states.
- `orbitinvaders.input`: `ActionInput` maps named actions and analog inputs
  to predicates, per player, and tracks how long each action has been held.
- `orbitinvaders.input_conf`: the game's actions (`GameKey`, `AnalogInput`)
  and `map_game_keys`, which binds them to a keyboard, a mouse and gamepads.
- `orbitinvaders.camera`: `Camera` handles position, zoom, rotation,
  clamping to an area and world/screen conversion. It can also be moved,
  zoomed and rotated from a `Keyboard`.
- `orbitinvaders.text`: `Text` with inline colour codes (`TextColor`).
  `split_colored_rows` and `layout_rows` place segments on multiple lines
  with an `Alignment`, using a measuring function that you supply.
- `orbitinvaders.tilemap`: `TileMap` is a grid with bounds-checked access.
  `visible_tiles` and `out_of_bounds_cells` give the cells to draw for a
  screen area.
- `orbitinvaders.drawraw`: `QuadBatch` collects textured, tinted or flat
  quads into vertex and index arrays. Also `fix_texture_bleeding` and
  `rect_to_texture_coordinates`.
- `orbitinvaders.debugdraw`: `DebugLog` writes log lines prefixed with the
  tick count. `DebugDrawQueue` collects debug points, arrows, boxes and
  circles during update and draw.
- `orbitinvaders.loop`: `FrameClock` turns millisecond ticks into
  `FrameTiming`, capping long frames at 0.06 s. It keeps the game clock and
  produces FPS text every half second.

## Examples

```python
from orbitinvaders.vec import Vec
from orbitinvaders.bounds import BoxBounds, CircleBounds
from orbitinvaders.collide import collide

box = BoxBounds(0, 0, 10, 10)
ball = CircleBounds(Vec(12, 5), 3)

print(box.center())             # 5,5
print(collide(box, ball))       # True: the circle reaches into the box
print(Vec(3, 4).length())       # 5.0
```

Playing an animation from a sprite sheet:

```python
from orbitinvaders.animation import Animation, SheetFrameCalculator
from orbitinvaders.vec import VecI

sheet = SheetFrameCalculator(VecI(16, 16), 4)
anim = Animation(sheet.frames(0, 4, 0.1))
anim.update(0.25)
print(anim.current_rect())      # Rect(x=32.0, y=0.0, w=16.0, h=16.0)
```

Mapping input to actions:

```python
from orbitinvaders.input import ActionInput
from orbitinvaders.input_conf import GameKey, map_game_keys
from orbitinvaders.raw_input import GamePads, Key, Keyboard, Mouse

keyboard, mouse, pads = Keyboard(), Mouse(), GamePads()
actions = ActionInput()
map_game_keys(actions, keyboard, mouse, pads)

keyboard.update({Key.A})
actions.update(1 / 60)
print(actions.is_just_pressed(0, GameKey.LEFT))   # True
```

Keeping a save file:

```python
from orbitinvaders.savestate import SaveState

state = SaveState.open("orbitinvaders", 0, "saves")
with state.stream_put("best") as stream:
    stream.write(42).write(1.5)
state.save()                    # writes saves/save0.save
print(state.stream_get("best")) # ['42', '1.5']
```

Without a base directory, save files go to the user's configuration
directory under the game's name.

## What it does not do

This is a library, not a playable game. It has no window, no rendering, no
audio and no command to start anything. It does not provide scene
management, a main loop that drives a scene, or game entities such as the
invaders, the bullets and the player. To build a game with it, you supply
the window, the event reading and the drawing yourself, and feed them the
data that these modules produce.

## Tests

The test suite uses pytest. It is declared in the `test` extra:

```
pip install .[test]
pytest
```