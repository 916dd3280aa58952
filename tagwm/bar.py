"""Layout of the status bar: tags, layout symbol, window tabs and status.

Widths are measured with a ``text_width`` callable that returns a string's
width including the horizontal padding, so ``text_width("")`` is the padding
itself.  The bar is one padding plus two pixels high.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Optional, Sequence, Union

from .client import Client, Monitor

TextWidth = Callable[[str], int]
ClickArg = Union[int, Client, None]


class Click(IntEnum):
    """Where a button press landed."""

    TAG_BAR = 0
    LT_SYMBOL = 1
    STATUS_TEXT = 2
    WIN_TITLE = 3
    CLIENT_WIN = 4
    ROOT_WIN = 5


@dataclass
class BarItem:
    """One drawn piece of the bar.

    ``arg`` is the tag mask for a tag, the client for a window tab and None
    otherwise.  An empty title area is a WIN_TITLE item without text.
    """

    click: Click
    x: int
    w: int
    text: str
    arg: ClickArg = None
    selected: bool = False
    urgent: bool = False
    hidden: bool = False


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def occupied_tags(monitor: Monitor) -> tuple[int, int]:
    """Tags holding any client, and tags holding an urgent client."""
    occ = urg = 0
    for c in monitor.clients:
        occ |= c.tags
        if c.is_urgent:
            urg |= c.tags
    return occ, urg


def _shown_tag(monitor: Monitor, occ: int, i: int) -> bool:
    bit = 1 << i
    return bool(occ & bit or monitor.tagset[monitor.seltags] & bit)


def tab_widths(n: int, width: int) -> list[int]:
    """Widths of ``n`` window tabs sharing ``width`` pixels."""
    if n <= 0:
        return []
    remainder = width % n
    tabw = int((1.0 / n) * width + 1)
    result = []
    for _ in range(n):
        if remainder >= 0:
            if remainder == 0:
                tabw -= 1
            remainder -= 1
        result.append(tabw)
    return result


def bar_items(
    monitor: Monitor,
    tags: Sequence[str],
    text_width: TextWidth,
    status: Optional[str],
    bar_width: int,
) -> list[BarItem]:
    """Lay out the bar of ``monitor``, ``bar_width`` pixels wide.

    ``status`` is drawn only when given (the selected monitor).  The number
    of tabs and the width of the title area are stored on the monitor.
    """
    m = monitor
    if not m.showbar:
        return []
    lrpad = text_width("")
    bh = lrpad + 2
    items: list[BarItem] = []
    tw = 0
    if status is not None:
        tw = text_width(status) - lrpad // 2 + 2
        items.append(BarItem(Click.STATUS_TEXT, bar_width - tw, tw, status))

    visible = [c for c in m.clients if m.is_visible(c)]
    occ, urg = occupied_tags(m)
    x = 0
    seltags = m.tagset[m.seltags]
    for i, name in enumerate(tags):
        if not _shown_tag(m, occ, i):
            continue
        w = text_width(name)
        bit = 1 << i
        items.append(
            BarItem(Click.TAG_BAR, x, w, name, bit, bool(seltags & bit), bool(urg & bit))
        )
        x += w
    w = text_width(m.ltsymbol)
    items.append(BarItem(Click.LT_SYMBOL, x, w, m.ltsymbol))
    x += w

    w = bar_width - tw - x
    if w > bh:
        if visible:
            for c, tabw in zip(visible, tab_widths(len(visible), w)):
                items.append(
                    BarItem(
                        Click.WIN_TITLE, x, tabw, c.name, c,
                        selected=m.sel is c,
                        hidden=m.sel is not c and c.hidden,
                    )
                )
                x += tabw
        else:
            items.append(BarItem(Click.WIN_TITLE, x, w, ""))
    m.bt = len(visible)
    m.btw = w
    return items


def click_at(
    monitor: Monitor,
    tags: Sequence[str],
    text_width: TextWidth,
    status: Optional[str],
    x: int,
) -> tuple[Click, ClickArg]:
    """What a press at ``x`` on the bar of ``monitor`` hits, and its argument.

    Relies on the tab count and title width stored by :func:`bar_items`.
    """
    m = monitor
    lrpad = text_width("")
    occ, _ = occupied_tags(m)
    i = 0
    pos = 0
    while i < len(tags):
        if _shown_tag(m, occ, i):
            pos += text_width(tags[i])
        if not x >= pos:
            break
        i += 1
    if i < len(tags):
        return Click.TAG_BAR, 1 << i
    lt_w = text_width(m.ltsymbol)
    if x < pos + lt_w:
        return Click.LT_SYMBOL, None
    if x > m.ww - text_width(status or "") + lrpad - 2:
        return Click.STATUS_TEXT, None
    pos += lt_w
    if not m.clients:
        return Click.ROOT_WIN, None
    target: Optional[Client] = None
    for c in m.clients:
        target = c
        if m.is_visible(c) and m.bt:
            pos = int(pos + (1.0 / m.bt) * m.btw)
        if not x > pos:
            break
    else:
        target = None
    return Click.WIN_TITLE, target


def systray_width(icon_widths: Iterable[int], spacing: int, enabled: bool) -> int:
    """Width of the system tray holding icons of the given widths."""
    if not enabled:
        return 1
    w = sum(iw + spacing for iw in icon_widths)
    return w + spacing if w else 1


def systray_icon_geometry(w: int, h: int, bar_height: int) -> tuple[int, int]:
    """Size of a tray icon that asked for ``w`` x ``h``, fitted to the bar."""
    bh = bar_height
    ih = bh
    if w == h:
        iw = bh
    elif h == bh:
        iw = w
    else:
        if h == 0:
            raise ValueError("icon height must not be zero")
        iw = int(_f32(bh * _f32(w / h)))
    if ih > bh:
        iw = bh if iw == ih else int(_f32(bh * _f32(iw / ih)))
        ih = bh
    return iw, ih