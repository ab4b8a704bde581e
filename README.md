# gfckit

Building blocks for small 2D games. It covers colours, vectors, rectangles,
sprite geometry and motion, game state tracking and cached resource loading.
The package uses only the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## Modules

### `gfckit.color`

`Color` is an immutable RGBA colour, a frozen dataclass with fields `r`,
`g`, `b` and `a`. Alpha defaults to 255. Values given to the constructor are
reduced to 8 bits (`& 0xFF`).

The operators work per channel:

- `+` saturates at 255 and `-` saturates at 0.
- `*` with another colour multiplies and divides by 255. `*` with an int
  multiplies by `Color(n, n, n, 255)`.
- `|`, `&` and `^` are bitwise.
- `~` inverts r, g and b and leaves alpha unchanged.

The palette class methods are:

- `red`, `green`, `blue`
- `yellow`, `cyan`, `magenta`
- `dark_*` variants, with a default shade of 128
- `light_*(gray, shade)`, which OR the colour with `white(gray)`
- `white`, `light_gray`, `dark_gray`, `black`

Two more class methods build colours:

- `Color.any_but(c1[, c2])` returns black, white or dark grey, whichever
  differs from the given colours.
- `Color.hsb(hue, saturation, brightness)` converts a hue in degrees and a
  saturation and brightness in the range 0..1.

### `gfckit.vector`

`Vector` is an immutable 2D vector with fields `x` and `y`. It supports:

- `+` and `-`.
- `*` with a vector (per component) or with a scalar, on either side.
- `/` by a scalar.
- unary `-` and `+`.
- `length()`, `sqr_length()` and `distance(other)`.
- `normalized()`. A zero vector stays zero.
- `to_int()`, which truncates both components towards zero.

The module also provides these functions:

- `dot` and `cross`.
- `cross_scalar(f, q)`.
- `reflect(vec, normal)`.
- `rad2deg` and `deg2rad`.

### `gfckit.rectangle`

`Rectangle(x, y, w, h)` is a mutable integer rectangle anchored at its
bottom-left corner. Width and height are kept non-negative: `set` turns a
negative size inside out, while `set_coll` collapses it to zero. The
setters `set_tops` and `set_tops_coll` take two corners instead.

Other methods:

- `offset`, `move_to`, `y_inv`, `set_empty` and `is_empty`.
- `grow` takes one amount, two amounts (horizontal and vertical) or four
  amounts.
- `union` and `intersection` change the rectangle in place and return it.
- `contains` tests a point, edges included.
- `intersects` is true only for an overlap with non-zero area.

Read-only properties: `left`, `right`, `bottom`, `top`, `center_x` and
`center_y`.

The operators return new rectangles:

- `+` with a `Vector` offsets the rectangle.
- `+` with a `Rectangle` gives their union.
- `-` with a `Vector` offsets the rectangle in the opposite direction.
- `*` gives the intersection.

Rectangles compare by value and are not hashable.

### `gfckit.filemgr`

`FileManager(path, load_handler, delete_handler=None, base_dir=None)` finds
files along a semicolon-separated list of directories.

- Every `%` in the path is replaced by `base_dir`. When no `base_dir` is
  given, it is the directory of the running script.
- `find_path(name)` returns the first readable `directory + name`. If none
  is found, or if the name already has a drive or directory part, it
  returns the name unchanged.
- `load(name)` calls the load handler once per name and caches the result.
- `close()` passes every cached object to the delete handler and clears the
  cache.

The manager is also a context manager and calls `close()` on exit.

### `gfckit.prop`

`Property(value)` holds an int, a float, a string, an image (any other
object, copied when stored) or nothing. Its kind is given by `kind`, a
`PropertyKind`.

It converts with `int()`, `float()` and `str()`, falling back to `0`,
`0.0` or `""` when the kind does not match. Indexed sub-properties live in
the `indexed` list. `copy()` copies these too.

### `gfckit.game`

`Game` holds the playfield size, game mode (`GameMode`), level, pause and
running flags, and timing.

- Mode and level changes are requests. `start_game`, `game_over`,
  `new_game`, `change_mode`, `set_level` and `new_level` only set
  `requested_mode` or `requested_level`.
- `delta_time` is the unsigned 32-bit difference between `time` and
  `time_prev`.

The life-cycle hooks are `on_initialize`, `on_display_menu`,
`on_start_game`, `on_start_level`, `on_game_over`, `on_update`, `on_draw`
and `on_terminate`. You can override them. You can also attach callables
with `connect("on_update", handler)`; the default hooks call them in order.

### `gfckit.sprite_list`

`SpriteList` is a `list` subclass with three extra methods:

- `delete_if(predicate)` removes matching items in place.
- `for_each(method, *args)` calls an unbound method or a method name on
  every item.
- `delete_all()` clears the list.

The `deleted(item)` predicate reads an item's `is_deleted`.

### `gfckit.timetext`

`timetext(ms)` formats milliseconds as `MM:SS.cc`. Minutes wrap at 100.

### `gfckit.sprite_geometry`

`SpriteGeometry(x, y, w, h)` stores the position of the pivot point and
the corners relative to it. The pivot starts at the centre.

- Global sides (`left`, `right`, `bottom`, `top`, `bottom_left`,
  `top_right`) can be read and set.
- Local sides can also be read and set.
- Further accessors are `size`, `width`, `height`, `center_local()`,
  `pivot_from_center` and `move()`.
- `client_rect()` and `no_rot_bounding_rect()` return `Rectangle`s.

### `gfckit.sprite`

`Sprite(x, y, w, h, time)` extends `SpriteGeometry`.

- Deletion: `delete` and `undelete`.
- Timed death: `die`, `undie`, `time_to_die()` and `is_dead`.
- Drawing state flags: `validate` and `invalidate`.
- User fields: `state`, `health` and `mass`.

Motion is stored as a unit direction and a scalar `speed`:

- `set_velocity` and the `velocity` property.
- `x_velocity` and `y_velocity`.
- `set_direction(degrees)`, measured anti-clockwise with 0 pointing up.
  `set_direction_towards` points along a given vector.
- `set_normalised_velocity`.
- `proceed` and `proceed_velocity`.
- `accelerate`.
- `apply_force`, which does nothing unless `mass > 0`.

## Example

```python
from gfckit.color import Color
from gfckit.vector import Vector, dot
from gfckit.rectangle import Rectangle
from gfckit.sprite import Sprite
from gfckit.sprite_list import SpriteList, deleted
from gfckit.timetext import timetext

yellow = Color.red() | Color.green()
assert yellow == Color.yellow()

v = Vector(3, 4)
assert v.length() == 5
assert dot(v, Vector(1, 0)) == 3

r = Rectangle(0, 0, 10, 10) * Rectangle(5, 5, 10, 10)
assert r == Rectangle(5, 5, 5, 5)

sprites = SpriteList([Sprite(0, 0, 10, 10, 0), Sprite(20, 20, 10, 10, 0)])
sprites[0].delete()
sprites.delete_if(deleted)
assert len(sprites) == 1

print(timetext(83450))  # 01:23.45
```

## What it does not do

This package has no window, screen or drawing surface. It does not render
graphics, text or fonts, play sound, or read keyboard, mouse or joystick
input.

There is no application loop. Nothing advances `Game.time`, applies the
requested mode or level, or calls the `on_*` hooks; your own loop has to do
that.

Sprites have no images, animation, rotation, hit tests, or update and draw
cycles. They cover only geometry, motion and life-cycle state.

## Running the tests

```
pip install -e ".[test]"
pytest
```