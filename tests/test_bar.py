import pytest

from tagwm.bar import (
    BarItem,
    Click,
    bar_items,
    click_at,
    occupied_tags,
    systray_icon_geometry,
    systray_width,
    tab_widths,
)
from tagwm.client import Client, Layout, Monitor

TAGS = tuple(str(i) for i in range(1, 10))


def text_width(s):
    return 8 * len(s) + 4


def make_monitor(*clients, ww=400):
    m = Monitor([Layout("[]=", None)])
    m.ww = m.mw = ww
    m.wh = m.mh = 300
    for c in clients:
        c.mon = m
        m.clients.append(c)
        m.stack.append(c)
    return m


def test_occupied_tags():
    a = Client(win=1, tags=0b01)
    b = Client(win=2, tags=0b10, is_urgent=True)
    m = make_monitor(a, b)
    assert occupied_tags(m) == (0b11, 0b10)


def test_hidden_bar_has_no_items():
    m = make_monitor(Client(win=1, tags=1))
    m.showbar = False
    assert bar_items(m, TAGS, text_width, "hi", m.ww) == []


def test_only_occupied_or_selected_tags_are_shown():
    a = Client(win=1, tags=1 << 4)
    m = make_monitor(a)
    items = bar_items(m, TAGS, text_width, None, m.ww)
    tag_items = [i for i in items if i.click is Click.TAG_BAR]
    assert [i.text for i in tag_items] == [TAGS[0], TAGS[4]]
    assert tag_items[0].selected and not tag_items[1].selected


def test_items_are_contiguous_and_fill_bar():
    a = Client(win=1, tags=1, name="alpha")
    c = Client(win=3, tags=1, name="gamma")
    m = make_monitor(a, c)
    items = bar_items(m, TAGS, text_width, "hi", m.ww)
    status = items[0]
    assert status.click is Click.STATUS_TEXT
    rest = items[1:]
    for left, right in zip(rest, rest[1:]):
        assert left.x + left.w == right.x
    assert rest[-1].x + rest[-1].w == status.x
    assert m.bt == 2


def test_click_round_trip():
    a = Client(win=1, tags=1, name="alpha")
    b = Client(win=2, tags=2, name="beta")
    c = Client(win=3, tags=1, name="gamma", is_urgent=True)
    m = make_monitor(a, b, c)
    items = bar_items(m, TAGS, text_width, "hi", m.ww)
    for item in items:
        mid = item.x + item.w // 2
        assert click_at(m, TAGS, text_width, "hi", mid) == (item.click, item.arg)


def test_window_tabs_mark_selected_and_hidden():
    a = Client(win=1, tags=1, name="alpha")
    c = Client(win=3, tags=1, name="gamma", hidden=True)
    m = make_monitor(a, c)
    m.sel = a
    tabs = [i for i in bar_items(m, TAGS, text_width, None, m.ww) if i.click is Click.WIN_TITLE]
    assert [t.arg for t in tabs] == [a, c]
    assert tabs[0].selected and not tabs[0].hidden
    assert tabs[1].hidden and not tabs[1].selected


def test_empty_title_area_when_nothing_visible():
    b = Client(win=2, tags=2, name="beta")
    m = make_monitor(b)
    items = bar_items(m, TAGS, text_width, None, m.ww)
    last = items[-1]
    assert last.click is Click.WIN_TITLE and last.text == "" and last.arg is None
    assert last.x + last.w == m.ww
    assert click_at(m, TAGS, text_width, None, last.x + 1) == (Click.WIN_TITLE, None)


def test_click_without_clients_hits_root():
    m = make_monitor()
    items = bar_items(m, TAGS, text_width, None, m.ww)
    empty = items[-1]
    assert click_at(m, TAGS, text_width, None, empty.x + 1) == (Click.ROOT_WIN, None)


def test_bar_item_defaults():
    item = BarItem(Click.LT_SYMBOL, 0, 10, "[]=")
    assert (item.arg, item.selected, item.urgent, item.hidden) == (None, False, False, False)


@pytest.mark.parametrize("n,width", [(1, 50), (3, 100), (3, 99), (4, 201), (5, 37)])
def test_tab_widths_share_width(n, width):
    widths = tab_widths(n, width)
    assert len(widths) == n
    assert sum(widths) == width
    assert max(widths) - min(widths) <= 1


def test_tab_widths_zero_tabs():
    assert tab_widths(0, 100) == []


def test_systray_width_empty_and_disabled():
    assert systray_width([], 2, True) == 1
    assert systray_width([10, 20], 2, False) == 1


def test_systray_width_grows_per_icon():
    base = systray_width([10], 2, True)
    assert systray_width([10, 15], 2, True) == base + 15 + 2


def test_systray_icon_square_takes_bar_height():
    assert systray_icon_geometry(16, 16, 20) == (20, 20)


def test_systray_icon_matching_height_keeps_width():
    assert systray_icon_geometry(37, 20, 20) == (37, 20)


def test_systray_icon_wide_is_scaled():
    iw, ih = systray_icon_geometry(32, 16, 20)
    assert ih == 20
    assert iw == 2 * ih


def test_systray_icon_zero_height():
    with pytest.raises(ValueError):
        systray_icon_geometry(5, 0, 20)