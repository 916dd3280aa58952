"""Drawing abstraction: fonts with fallback, colour schemes and a canvas."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Mapping, Sequence

from .utf8 import UTF_SIZ, decode_at, iter_codepoints

_NOMATCHES_LEN = 64
_UNBOUNDED = 0xFFFFFFFF


class ColorIndex(IntEnum):
    """Position of each colour inside a scheme."""

    FG = 0
    BG = 1
    BORDER = 2


@dataclass
class Font:
    """A font: metrics, glyph coverage and advance widths.

    ``name`` is the pattern the font was loaded from; fonts found by
    fallback matching have none.  ``charset`` of ``None`` covers everything.
    """

    name: str | None
    ascent: int
    descent: int
    char_width: int = 1
    widths: Mapping[int, int] = field(default_factory=dict)
    charset: frozenset[int] | None = None

    @property
    def h(self) -> int:
        return self.ascent + self.descent

    def has_char(self, codepoint: int) -> bool:
        return self.charset is None or codepoint in self.charset

    def extents(self, text: bytes | str) -> int:
        """Horizontal advance of ``text`` in pixels."""
        return sum(self.widths.get(cp, self.char_width) for cp, _ in iter_codepoints(text))


@dataclass
class TextRun:
    """A piece of text drawn on the canvas, ``y`` being the baseline."""

    x: int
    y: int
    text: str
    font: Font
    color: int


FallbackMatcher = Callable[[str, int], "Font | None"]


def _parse_color(name: str) -> int:
    match = re.fullmatch(r"#([0-9a-fA-F]+)", name)
    if not match or len(match.group(1)) not in (3, 6, 9, 12):
        raise ValueError(f"cannot allocate color '{name}'")
    digits = match.group(1)
    n = len(digits) // 3
    pixel = 0
    for i in range(3):
        value = int(digits[i * n:(i + 1) * n], 16) << (16 - 4 * n)
        pixel = (pixel << 8) | (value >> 8)
    return pixel


def create_scheme(color_names: Iterable[str]) -> list[int]:
    """Allocate a colour scheme; each entry is a 24-bit RGB pixel value."""
    names = list(color_names)
    if len(names) < 2:
        raise ValueError("a colour scheme needs at least two colours")
    return [_parse_color(name) for name in names]


class Drw:
    """An off-screen drawable recording what is drawn on it."""

    def __init__(
        self,
        w: int,
        h: int,
        fonts: Iterable[Font] = (),
        fallback: FallbackMatcher | None = None,
    ) -> None:
        self.w = w
        self.h = h
        self.fonts: list[Font] = list(fonts)
        self.fallback = fallback
        self.scheme: Sequence[int] | None = None
        self.rects: list[tuple[int, int, int, int, int, bool]] = []
        self.runs: list[TextRun] = []
        self._ellipsis_width = 0
        self._nomatches: deque[int] = deque(maxlen=_NOMATCHES_LEN)

    def resize(self, w: int, h: int) -> None:
        """Replace the drawable by a blank one of the given size."""
        self.w = w
        self.h = h
        self.rects.clear()
        self.runs.clear()

    def set_fontset(self, fonts: Iterable[Font]) -> None:
        self.fonts = list(fonts)

    def set_scheme(self, scheme: Sequence[int] | None) -> None:
        self.scheme = scheme

    def rect(self, x: int, y: int, w: int, h: int, filled: bool, invert: bool) -> None:
        if not self.scheme:
            return
        color = self.scheme[ColorIndex.BG if invert else ColorIndex.FG]
        if filled:
            self.rects.append((x, y, w, h, color, True))
        else:
            self.rects.append((x, y, w - 1, h - 1, color, False))

    def _fallback_font(self, codepoint: int) -> Font | None:
        """Look up a font for ``codepoint``; None when matching found nothing."""
        if self.fonts[0].name is None:
            raise RuntimeError("the first font in the cache must be loaded from a font string.")
        if self.fallback is None:
            return None
        return self.fallback(self.fonts[0].name, codepoint)

    def text(self, x: int, y: int, w: int, h: int, lpad: int, text: bytes | str | None, invert) -> int:
        """Draw ``text`` clipped to ``w`` with an ellipsis, or measure it.

        With all of x, y, w and h zero nothing is drawn and the width is
        returned, ``invert`` then acting as the clamp width.
        """
        render = bool(x or y or w or h)
        if (render and (not self.scheme or not w)) or text is None or not self.fonts:
            return 0
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        data = data.split(b"\0", 1)[0]

        if not render:
            w = int(invert) if invert else _UNBOUNDED
        else:
            bg = self.scheme[ColorIndex.FG if invert else ColorIndex.BG]
            self.rects.append((x, y, w, h, bg, True))
            x += lpad
            w -= lpad

        usedfont = self.fonts[0]
        if not self._ellipsis_width and render:
            self._ellipsis_width = self.fontset_getwidth("...")

        pos = 0
        codepoint = 0
        charexists = False
        overflow = False
        ellipsis_x = ellipsis_w = 0
        while True:
            ew = ellipsis_len = strlen = 0
            start = pos
            nextfont: Font | None = None
            while pos < len(data):
                codepoint, charlen = decode_at(data, pos)
                if charlen == 0:
                    charlen = min(UTF_SIZ, len(data) - pos)
                for font in self.fonts:
                    charexists = charexists or font.has_char(codepoint)
                    if charexists:
                        tmpw = font.extents(data[pos:pos + charlen])
                        if ew + self._ellipsis_width <= w:
                            ellipsis_x = x + ew
                            ellipsis_w = w - ew
                            ellipsis_len = strlen
                        if ew + tmpw > w:
                            overflow = True
                            if not render:
                                x += tmpw
                            else:
                                strlen = ellipsis_len
                        elif font is usedfont:
                            strlen += charlen
                            pos += charlen
                            ew += tmpw
                        else:
                            nextfont = font
                        break
                if overflow or not charexists or nextfont:
                    break
                charexists = False

            if strlen:
                if render:
                    ty = y + (h - usedfont.h) // 2 + usedfont.ascent
                    fg = self.scheme[ColorIndex.BG if invert else ColorIndex.FG]
                    piece = data[start:start + strlen].decode("utf-8", "replace")
                    self.runs.append(TextRun(x, ty, piece, usedfont, fg))
                x += ew
                w -= ew
            if render and overflow:
                self.text(ellipsis_x, y, ellipsis_w, h, 0, "...", invert)

            if pos >= len(data) or overflow:
                break
            if nextfont:
                charexists = False
                usedfont = nextfont
                continue
            # The character is drawn whether or not a fallback font exists.
            charexists = True
            if codepoint in self._nomatches:
                usedfont = self.fonts[0]
                continue
            match = self._fallback_font(codepoint)
            if match is not None:
                if match.has_char(codepoint):
                    self.fonts.append(match)
                    usedfont = match
                else:
                    self._nomatches.append(codepoint)
                    usedfont = self.fonts[0]

        return x + (w if render else 0)

    def fontset_getwidth(self, text: bytes | str | None) -> int:
        if not self.fonts or text is None:
            return 0
        return self.text(0, 0, 0, 0, 0, text, 0)

    def fontset_getwidth_clamp(self, text: bytes | str | None, n: int) -> int:
        width = 0
        if self.fonts and text is not None and n:
            width = self.text(0, 0, 0, 0, 0, text, n)
        return min(n, width)