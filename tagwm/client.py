"""Managed clients, monitors and the per-tag settings attached to them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Sequence


def _fdiv(a: float, b: float) -> float:
    """Division that yields inf/nan for a zero divisor, as floats do."""
    if b:
        return a / b
    if a:
        return math.copysign(math.inf, a)
    return math.nan


def _cmod(a: int, b: int) -> int:
    """Remainder truncated toward zero."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


@dataclass(frozen=True)
class SizeHints:
    """The WM_NORMAL_HINTS of a window; absent entries are None.

    Sizes are ``(width, height)``; aspects are ``(x, y)`` ratios.
    """

    base_size: Optional[tuple[int, int]] = None
    min_size: Optional[tuple[int, int]] = None
    max_size: Optional[tuple[int, int]] = None
    resize_inc: Optional[tuple[int, int]] = None
    min_aspect: Optional[tuple[int, int]] = None
    max_aspect: Optional[tuple[int, int]] = None


@dataclass(frozen=True)
class Layout:
    """A layout: the symbol shown in the bar and its arrange function.

    ``arrange`` of None means floating: clients are not tiled.
    """

    symbol: str
    arrange: Optional[Callable[..., None]] = None


@dataclass(frozen=True)
class Rule:
    """A tagging rule; None for class, instance or title matches anything."""

    wm_class: Optional[str] = None
    instance: Optional[str] = None
    title: Optional[str] = None
    tags: int = 0
    is_floating: bool = False
    monitor: int = -1


@dataclass(eq=False)
class Client:
    """A managed window and its geometry, hints and state."""

    win: int = 0
    name: str = ""
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    oldx: int = 0
    oldy: int = 0
    oldw: int = 0
    oldh: int = 0
    bw: int = 0
    oldbw: int = 0
    tags: int = 0
    mina: float = 0.0
    maxa: float = 0.0
    basew: int = 0
    baseh: int = 0
    incw: int = 0
    inch: int = 0
    maxw: int = 0
    maxh: int = 0
    minw: int = 0
    minh: int = 0
    hints_valid: bool = False
    is_fixed: bool = False
    is_floating: bool = False
    is_urgent: bool = False
    never_focus: bool = False
    old_state: bool = False
    is_fullscreen: bool = False
    hidden: bool = False
    size_hints: Optional[SizeHints] = None
    mon: Optional["Monitor"] = None

    @property
    def full_width(self) -> int:
        """Width including both borders."""
        return self.w + 2 * self.bw

    @property
    def full_height(self) -> int:
        """Height including both borders."""
        return self.h + 2 * self.bw

    def update_size_hints(self, hints: Optional[SizeHints]) -> None:
        """Take over size constraints from ``hints`` (None: no hints)."""
        hints = hints or SizeHints()
        self.size_hints = hints
        if hints.base_size is not None:
            self.basew, self.baseh = hints.base_size
        elif hints.min_size is not None:
            self.basew, self.baseh = hints.min_size
        else:
            self.basew = self.baseh = 0
        if hints.resize_inc is not None:
            self.incw, self.inch = hints.resize_inc
        else:
            self.incw = self.inch = 0
        if hints.max_size is not None:
            self.maxw, self.maxh = hints.max_size
        else:
            self.maxw = self.maxh = 0
        if hints.min_size is not None:
            self.minw, self.minh = hints.min_size
        elif hints.base_size is not None:
            self.minw, self.minh = hints.base_size
        else:
            self.minw = self.minh = 0
        if hints.min_aspect is not None and hints.max_aspect is not None:
            self.mina = _fdiv(hints.min_aspect[1], hints.min_aspect[0])
            self.maxa = _fdiv(hints.max_aspect[0], hints.max_aspect[1])
        else:
            self.mina = self.maxa = 0.0
        self.is_fixed = bool(
            self.maxw and self.maxh and self.maxw == self.minw and self.maxh == self.minh
        )
        self.hints_valid = True

    def apply_size_hints(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        interact: bool,
        screen_w: int,
        screen_h: int,
        bar_height: int,
        resize_hints: bool,
    ) -> tuple[int, int, int, int, bool]:
        """Constrain a requested geometry.

        Returns ``(x, y, w, h, changed)`` where ``changed`` tells whether the
        result differs from the client's current geometry.
        """
        m = self.mon
        if m is None:
            raise ValueError("client is not attached to a monitor")
        w = max(1, w)
        h = max(1, h)
        if interact:
            if x > screen_w:
                x = screen_w - self.full_width
            if y > screen_h:
                y = screen_h - self.full_height
            if x + w + 2 * self.bw < 0:
                x = 0
            if y + h + 2 * self.bw < 0:
                y = 0
        else:
            if x >= m.wx + m.ww:
                x = m.wx + m.ww - self.full_width
            if y >= m.wy + m.wh:
                y = m.wy + m.wh - self.full_height
            if x + w + 2 * self.bw <= m.wx:
                x = m.wx
            if y + h + 2 * self.bw <= m.wy:
                y = m.wy
        if h < bar_height:
            h = bar_height
        if w < bar_height:
            w = bar_height
        if resize_hints or self.is_floating or not m.layout.arrange:
            if not self.hints_valid:
                self.update_size_hints(self.size_hints)
            # see the last two sentences of ICCCM 4.1.2.3
            base_is_min = self.basew == self.minw and self.baseh == self.minh
            if not base_is_min:
                w -= self.basew
                h -= self.baseh
            if self.mina > 0 and self.maxa > 0:
                if self.maxa < _fdiv(w, h):
                    w = int(h * self.maxa + 0.5)
                elif self.mina < _fdiv(h, w):
                    h = int(w * self.mina + 0.5)
            if base_is_min:
                w -= self.basew
                h -= self.baseh
            if self.incw:
                w -= _cmod(w, self.incw)
            if self.inch:
                h -= _cmod(h, self.inch)
            w = max(w + self.basew, self.minw)
            h = max(h + self.baseh, self.minh)
            if self.maxw:
                w = min(w, self.maxw)
            if self.maxh:
                h = min(h, self.maxh)
        changed = (x, y, w, h) != (self.x, self.y, self.w, self.h)
        return x, y, w, h, changed


@dataclass
class Pertag:
    """Settings remembered separately for each tag (index 0: all tags)."""

    nmasters: list[int]
    mfacts: list[float]
    sellts: list[int]
    ltidxs: list[list[Layout]]
    showbars: list[bool]
    curtag: int = 1
    prevtag: int = 1


class Monitor:
    """A screen area with its clients, focus stack, bar and layouts."""

    def __init__(
        self,
        layouts: Sequence[Layout],
        ntags: int = 9,
        mfact: float = 0.55,
        nmaster: int = 1,
        showbar: bool = True,
        topbar: bool = True,
        gappx: int = 0,
        num: int = 0,
    ) -> None:
        if not layouts:
            raise ValueError("at least one layout is required")
        if ntags > 31:
            raise ValueError("tags do not fit into the tag mask")
        self.num = num
        self.mfact = mfact
        self.nmaster = nmaster
        self.showbar = showbar
        self.topbar = topbar
        self.gappx = gappx
        self.mx = self.my = self.mw = self.mh = 0
        self.wx = self.wy = self.ww = self.wh = 0
        self.by = 0
        self.bt = 0
        self.btw = 0
        self.seltags = 0
        self.sellt = 0
        self.tagset = [1, 1]
        self.hidsel = False
        self.clients: list[Client] = []
        self.stack: list[Client] = []
        self.sel: Optional[Client] = None
        self.barwin = 0
        self.lt: list[Layout] = [layouts[0], layouts[1 % len(layouts)]]
        self.ltsymbol = layouts[0].symbol
        slots = ntags + 1
        self.pertag = Pertag(
            nmasters=[nmaster] * slots,
            mfacts=[mfact] * slots,
            sellts=[self.sellt] * slots,
            ltidxs=[list(self.lt) for _ in range(slots)],
            showbars=[showbar] * slots,
        )

    @property
    def layout(self) -> Layout:
        """The selected layout."""
        return self.lt[self.sellt]

    def is_visible(self, client: Client) -> bool:
        return bool(client.tags & self.tagset[self.seltags])

    def tiled_clients(self) -> Iterator[Client]:
        """Visible, non-floating, non-hidden clients in list order."""
        return (
            c for c in self.clients
            if not c.is_floating and self.is_visible(c) and not c.hidden
        )

    def update_bar_pos(self, bar_height: int) -> None:
        """Recompute the window area and bar position."""
        self.wy = self.my
        self.wh = self.mh
        if self.showbar:
            self.wh -= bar_height
            self.by = self.wy if self.topbar else self.wy + self.wh
            self.wy = self.wy + bar_height if self.topbar else self.wy
        else:
            self.by = -bar_height

    def intersect(self, x: int, y: int, w: int, h: int) -> int:
        """Area shared by the rectangle and this monitor's window area."""
        dx = max(0, min(x + w, self.wx + self.ww) - max(x, self.wx))
        dy = max(0, min(y + h, self.wy + self.wh) - max(y, self.wy))
        return dx * dy