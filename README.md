# neoframe

The logic behind a graphical front end for a modal text editor, with no
drawing backend attached. It is pure Python with no dependencies. It covers:

- easing curves and interpolation (`neoframe.animation`): `ease_linear`,
  `ease_in_quad` through `ease_out_expo`, `lerp`, `ease`, `ease_point`, and
  the small `Point` and `Rect` types;
- loose coercion of editor-supplied setting values (`neoframe.values`):
  `coerce_float`, `coerce_u64`, `coerce_u32`, `coerce_i32`, `coerce_str` and
  `coerce_bool`, which keep the current value (and log an error) when the
  incoming value is of the wrong kind;
- window geometry parsing, grid resizing and window settings
  (`neoframe.window_geometry`): `parse_geometry`,
  `window_geometry_or_default`, `resize_grid`, `WindowSettings` and
  `default_window_settings`;
- cursor blinking (`neoframe.blink.BlinkStatus`), cursor corner animation
  and shapes (`neoframe.cursor`: `Corner`, `CursorShape`, `shape_corners`,
  `cursor_destination`) and cursor settings
  (`neoframe.cursor_settings.CursorSettings`);
- cursor effects (`neoframe.vfx_mode.VfxMode`, `parse_vfx_mode`, and
  `neoframe.cursor_vfx`: `PointHighlight`, `ParticleTrail`, `new_cursor_vfx`
  and the seeded `Pcg32` generator the trails use);
- window position and scroll animation (`neoframe.window_animation`:
  `WindowAnimation`, `RendererSettings`, `WindowDrawDetails`) and the
  tracking and draw ordering of all windows (`neoframe.window_tracker`:
  `WindowTracker`, `draw_order`, `text_region`);
- key presses turned into editor key notation
  (`neoframe.keyboard`: `Key`, `key_text`, `KeyboardManager`).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Easing a value:

```python
from neoframe.animation import ease, ease_in_out_cubic

ease(ease_in_out_cubic, 1.0, 0.0, 0.25)   # 0.9375
```

Parsing window geometry and sizing the grid:

```python
from neoframe.window_geometry import parse_geometry, resize_grid

parse_geometry("100x50", (100, 50))   # (100, 50)
parse_geometry(None, (100, 50))       # (100, 50), the default
resize_grid((800, 600), 8, 16)        # (100, 37)
```

`parse_geometry` raises `ValueError` for a malformed geometry or a zero
dimension; `window_geometry_or_default` returns the default instead.

Changing a cursor setting from an editor value:

```python
from neoframe.cursor_settings import CursorSettings
from neoframe.vfx_mode import VfxMode

settings = CursorSettings()
settings.apply("vfx_mode", "torpedo")
settings.vfx_mode is VfxMode.TORPEDO   # True
settings.apply("trail_size", "wide")   # wrong kind: logged, value kept at 0.7
```

Turning key presses into key notation:

```python
from neoframe.keyboard import Key, KeyboardManager

sent = []
keyboard = KeyboardManager(sent.append)
keyboard.set_modifiers(shift=False, ctrl=True, alt=False, logo=False)
keyboard.handle_key_press(Key.ESCAPE)
sent   # ['<C-Esc>']
```

Tracking windows and their draw order:

```python
from neoframe.window_animation import RendererSettings
from neoframe.window_tracker import WindowTracker

tracker = WindowTracker()
tracker.position(1, 0, 0, 80, 24, None)
tracker.position(2, 10, 5, 20, 5, None)
tracker.update(RendererSettings(), 0.016, 8, 16)
[details.id for details in tracker.window_regions]   # [1, 2]
```

## What it does not do

The package draws nothing and opens no window: it computes positions, states
and strings for a renderer to use. It has no connection to a running editor,
so there is no store that reads settings from the editor or pushes changes
back; settings are plain dataclasses updated through `CursorSettings.apply`
or the `neoframe.values` functions. It does not parse font settings or load
fonts, and it does not translate mouse movement, clicks or scrolling into
editor input.