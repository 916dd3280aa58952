# tagwm

Building blocks for a dynamic, tag-based tiling window manager, written as
plain Python objects. Nothing in the package opens a display connection.
Clients, monitors and tags are ordinary data, so size constraints, bar layout
and text measurement can be computed and checked without a running X server.

## Modules

- `tagwm.client` holds the data types.
  - `Client` is a managed window: its geometry, border, tags and state flags.
    `Client.update_size_hints` takes over ICCCM size hints from a `SizeHints`
    value: base, minimum and maximum size, resize increments and aspect ratio.
    `Client.apply_size_hints` fits a requested geometry to the monitor and to
    those hints. It returns `(x, y, w, h, changed)`.
  - `Monitor` is a screen area with its client list, focus stack, selected
    client and tag sets. It holds two layout slots and per-tag settings
    (`Pertag`). Its methods are `is_visible`, `tiled_clients`,
    `update_bar_pos` and `intersect`.
  - `Layout` pairs a bar symbol with an optional arrange function.
  - `Rule` describes a tagging rule.
- `tagwm.bar` computes the status bar geometry.
  - `bar_items` lays out the tags, the layout symbol, the window tabs and the
    status text as `BarItem`s.
  - `click_at` tells what a press at a given x lands on, as a `Click` and its
    argument.
  - `occupied_tags` returns the tags that hold a client and the tags that hold
    an urgent client.
  - `tab_widths` splits a width into window tabs.
  - `systray_width` and `systray_icon_geometry` size the system tray and its
    icons.
- `tagwm.drw` measures and draws text.
  - `Drw` works across a chain of `Font`s, with optional fallback matching.
    Text that is too wide is cut short with an ellipsis.
  - Drawing is recorded on the `Drw` as rectangles and `TextRun`s.
  - `create_scheme` turns `#rgb`-style colour names into pixel values, indexed
    by `ColorIndex`.
- `tagwm.utf8` is a lenient UTF-8 decoder. Bad sequences become U+FFFD. Its
  functions are `decode_byte`, `validate`, `utf8_decode` and
  `iter_codepoints`.
- `tagwm.boxdraw` classifies box-drawing glyphs (U+2500–U+259F) and braille
  glyphs (U+2800–U+28FF) into shapes. `box_data` gives the encoded shape of a
  code point, `is_boxdraw` tells whether one is drawn as a shape, and
  `decode_shape` splits an encoded shape into a `Shape` (`Category`, data,
  bold).
- `tagwm.args` scans clustered short options (`-abc -f value`) with
  `ArgReader`. A missing required option argument raises `UsageError`.

## Install

```
pip install .
```

## Example

```python
from tagwm.bar import bar_items
from tagwm.client import Client, Layout, Monitor
from tagwm.drw import Drw, Font

mon = Monitor([Layout("[]="), Layout("><>")])
mon.mw = mon.ww = 1000
mon.mh = mon.wh = 600
mon.update_bar_pos(18)

client = Client(name="shell", tags=1, w=400, h=300, mon=mon)
mon.clients.append(client)
mon.sel = client

drw = Drw(1000, 18, fonts=[Font("monospace", ascent=12, descent=4, char_width=7)])
print(drw.fontset_getwidth("abc"))  # 21

items = bar_items(mon, ["1", "2", "3"], lambda s: drw.fontset_getwidth(s) + 16, "status", mon.ww)
for item in items:
    print(item.click.name, item.x, item.w, item.text)
```

## What it does not do

The package has no display connection and no event loop. It has no object that
manages windows across monitors: focusing, tagging, viewing and moving clients
are not provided. It has no arrangement algorithms, so a `Layout`'s arrange
function must be supplied by the caller. It installs no command-line program.

## Tests

```
pip install .[test]
pytest
```