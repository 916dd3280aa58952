import pytest

from tagwm.drw import ColorIndex, Drw, Font, TextRun, create_scheme

SMILE = "\u263a"


def ascii_font():
    return Font(name="mono", ascent=8, descent=2, char_width=10,
                charset=frozenset(range(0x20, 0x7F)))


@pytest.fixture
def drw():
    d = Drw(200, 20, [ascii_font()])
    d.set_scheme(create_scheme(["#000000", "#ffffff", "#ff0000"]))
    return d


def test_create_scheme_hex():
    assert create_scheme(["#ff0000", "#00ff00", "#0000ff"]) == [0xFF0000, 0x00FF00, 0x0000FF]


def test_create_scheme_short_hex():
    assert create_scheme(["#f00", "#000"]) == [0xF00000, 0]


def test_create_scheme_needs_two():
    with pytest.raises(ValueError):
        create_scheme(["#000000"])


def test_create_scheme_bad_name():
    with pytest.raises(ValueError):
        create_scheme(["bogus", "#000000"])


def test_font_metrics():
    font = Font(name="f", ascent=8, descent=2, char_width=7, widths={ord("W"): 12})
    assert font.h == 10
    assert font.extents("aW") == 7 + 12
    assert font.has_char(0x1F600)
    assert not ascii_font().has_char(0x1F600)


def test_getwidth_sums_advances(drw):
    font = drw.fonts[0]
    assert drw.fontset_getwidth("abc") == font.extents("abc")
    assert drw.fontset_getwidth(None) == 0


def test_getwidth_clamp(drw):
    assert drw.fontset_getwidth_clamp("ab", 25) == drw.fontset_getwidth("ab")
    assert drw.fontset_getwidth_clamp("abcdef", 25) == 25
    assert drw.fontset_getwidth_clamp("abc", 0) == 0


def test_render_text(drw):
    result = drw.text(0, 0, 100, 20, 5, "hi", False)
    assert result == 100
    assert drw.rects == [(0, 0, 100, 20, drw.scheme[ColorIndex.BG], True)]
    run = drw.runs[0]
    assert isinstance(run, TextRun)
    assert (run.x, run.y, run.text) == (5, 13, "hi")
    assert run.color == drw.scheme[ColorIndex.FG]


def test_render_inverted_swaps_colors(drw):
    drw.text(1, 0, 100, 20, 0, "x", True)
    assert drw.rects[0][4] == drw.scheme[ColorIndex.FG]
    assert drw.runs[0].color == drw.scheme[ColorIndex.BG]


def test_render_overflow_draws_ellipsis(drw):
    drw.text(0, 0, 50, 20, 0, "abcdefgh", False)
    assert [run.text for run in drw.runs] == ["ab", "..."]
    assert drw.runs[1].x == 20


def test_render_requires_scheme():
    d = Drw(100, 20, [ascii_font()])
    assert d.text(0, 0, 50, 20, 0, "abc", False) == 0
    assert d.runs == []


def test_fallback_font_is_cached():
    calls = []
    extra = Font(name=None, ascent=8, descent=2, char_width=20, charset=frozenset({ord(SMILE)}))

    def matcher(pattern, codepoint):
        calls.append((pattern, codepoint))
        return extra

    d = Drw(100, 20, [ascii_font()], fallback=matcher)
    width = d.fontset_getwidth("a" + SMILE)
    assert width == d.fontset_getwidth("a") + extra.extents(SMILE)
    assert d.fonts[-1] is extra
    assert calls == [("mono", ord(SMILE))]
    d.fontset_getwidth("a" + SMILE)
    assert len(calls) == 1


def test_unmatched_codepoint_remembered():
    calls = []
    useless = Font(name=None, ascent=8, descent=2, charset=frozenset())

    def matcher(pattern, codepoint):
        calls.append(codepoint)
        return useless

    d = Drw(100, 20, [ascii_font()], fallback=matcher)
    first = d.fontset_getwidth("a" + SMILE)
    assert first == d.fontset_getwidth("ab")
    d.fontset_getwidth("a" + SMILE)
    assert calls == [ord(SMILE)]
    assert len(d.fonts) == 1


def test_fallback_needs_named_first_font():
    d = Drw(100, 20, [Font(name=None, ascent=8, descent=2, charset=frozenset())])
    with pytest.raises(RuntimeError):
        d.fontset_getwidth("a")


def test_rect(drw):
    drw.rect(1, 2, 10, 5, True, False)
    drw.rect(1, 2, 10, 5, False, True)
    assert drw.rects == [
        (1, 2, 10, 5, drw.scheme[ColorIndex.FG], True),
        (1, 2, 9, 4, drw.scheme[ColorIndex.BG], False),
    ]


def test_rect_without_scheme():
    d = Drw(10, 10)
    d.rect(0, 0, 5, 5, True, False)
    assert d.rects == []


def test_resize_clears(drw):
    drw.text(0, 0, 100, 20, 0, "x", False)
    drw.resize(300, 40)
    assert (drw.w, drw.h) == (300, 40)
    assert drw.runs == [] and drw.rects == []


def test_set_fontset(drw):
    other = Font(name="other", ascent=5, descent=1)
    drw.set_fontset([other])
    assert drw.fonts == [other]