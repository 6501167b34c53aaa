# cubescape

The core of a small first-person maze shooter, in plain Python with no
dependencies beyond the standard library. It reads `.cub` scene files and XPM
textures, models windows and their event hooks, and holds the game logic.

## Modules

- `cubescape.colors`: the X11 colour-name table. `color_by_name(name)` returns
  `0xRRGGBB` and ignores letter case. `"none"` gives `-1`. An unknown name
  raises `KeyError`.
- `cubescape.visual`: `Visual(depth, red_mask, green_mask, blue_mask)`.
  `channel_shifts()` returns the shift and bit width of each channel.
  `good_color(color)` converts `0xRRGGBB` into a pixel value. Colours pass
  through unchanged at depth 24 and above.
- `cubescape.wordtab`: string helpers used by the XPM reader. `split_words`
  splits on spaces and tabs. `find` and `find_outside_quotes` search for a
  substring within a length limit, and the second skips double-quoted text.
- `cubescape.image`: `Image(width, height, bpp=32, byte_order=...)`, a packed
  pixel buffer with `pixel`, `set_pixel`, `fill` and `copy_from`. It also
  exposes `size_line` and `bytes_per_pixel`.
- `cubescape.xpm`: the XPM reader.
  - `read_xpm_file(path)` reads a file.
  - `xpm_to_image(strings)` builds an image from XPM data already split into
    its strings.
  - `parse_xpm`, `quoted_lines`, `strip_comments` and `text_rgb` are the steps
    these two use.
  - Pixels whose colour is `None` are stored as `TRANSPARENT` (`0xFF000000`).
  - Malformed data raises `XpmError`.
- `cubescape.events`: an in-process model of windows and their event loop.
  - `Display.new_window` opens a `Window`, and `destroy_window` closes it.
  - `Window.hook`, `key_hook`, `mouse_hook` and `expose_hook` install
    callbacks, and `event_mask` returns the union of their masks.
  - `Display.post_event` queues an `Event`.
  - `Display.loop` dispatches queued events and runs the `loop_hook`
    function. It returns when no window is left, after `loop_end`, or when
    there is no loop hook and nothing is pending.
- `cubescape.scene`: the header lines of a `.cub` file.
  - `parse_info_line` reads the texture lines (`NO`, `SO`, `WE`, `EA` with a
    `.xpm` path that must exist) and the colour lines (`F r,g,b`, `C r,g,b`)
    into a `MapData`.
  - `rgb_to_int` packs the three channels.
  - Errors raise `CubParseError`.
- `cubescape.cubfile`: the whole file.
  - `read_cub(path)` reads the header and the map grid.
  - `validate_map` checks that there is a start cell and that every walkable
    cell is enclosed.
  - `cub_parser(argv)` takes `[program, path.cub]`, checks the extension,
    reads the file and validates the map.
  - `parse_lines`, `fill_map_row` and `check_cell` are the parts these use.
- `cubescape.game`: game logic.
  - `fog_color` fades colours with distance.
  - `start_rotation` and `player_start` place the `Player`.
  - `Controls` tracks held keys with `press`, `release` and `rotation_delta`.
  - `bullet_collisions` and `reset_entities` act on lists of `Entity`.
  - `toggle_door` and `door_at` handle doors (`P` closed, `p` open).
  - `mouse_rotation` and `shot_speed` give turning and projectile speed.
  - `sprite_files` lists the texture paths the game loads.

## Examples

Reading and validating a scene:

```python
from cubescape.cubfile import cub_parser
from cubescape.game import player_start

scene = cub_parser(["game", "maps/level.cub"])
print(scene.floor, scene.ceiling, scene.width, scene.height, scene.facing)
player = player_start(scene.map_matrix, 1024, 768, 60)
print(player.x, player.y, player.rot)
```

Loading a texture:

```python
from cubescape.xpm import read_xpm_file

image = read_xpm_file("textures/wall.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
```

Driving the event model:

```python
from cubescape.events import Display, Event, EventType

display = Display()
window = display.new_window(320, 240, "demo")
window.key_hook(lambda key, param: print("key", key), None)
display.post_event(Event(EventType.KEY_RELEASE, window, key=0xFF1B))
display.loop()  # dispatches the event, then returns: no loop hook, nothing pending
```

Handling keys:

```python
from cubescape.game import Controls

controls = Controls()
controls.press(65361)              # left arrow: turn left
print(controls.rotation_delta())   # 4
print(controls.press(32))          # "shoot"
```

## What it does not do

- It draws nothing on screen. There is no raycasting renderer, and images live
  only in memory.
- `cubescape.events` is a model. Its events come from `post_event`, not from a
  real window system or input device.
- The package has no command to start a game.

## Tests

```
pip install -e .[test]
pytest
```