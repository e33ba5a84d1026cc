"""Tests for viewport offset transitions and clamping."""

import random

import pytest
from wrappager.model import Intent, Viewport, apply_intent, resize


def make_viewport(offset=0, height=20, width=80):
    return Viewport(offset=offset, width=width, height=height)


def test_scroll_down_moves_one_line():
    v = apply_intent(Intent.SCROLL_DOWN, make_viewport(offset=0), 100)
    assert v.offset == 1


def test_scroll_down_stops_at_last_page():
    v = apply_intent(Intent.SCROLL_DOWN, make_viewport(offset=80), 100)
    assert v.offset == 80


def test_scroll_down_is_noop_for_short_document():
    v = apply_intent(Intent.SCROLL_DOWN, make_viewport(offset=0, height=10), 5)
    assert v.offset == 0


def test_scroll_up_moves_one_line():
    v = apply_intent(Intent.SCROLL_UP, make_viewport(offset=5), 100)
    assert v.offset == 4


def test_scroll_up_at_top_returns_same_viewport():
    start = make_viewport(offset=0)

    v = apply_intent(Intent.SCROLL_UP, start, 100)

    assert v == start


def test_end_and_home_round_trip():
    v = apply_intent(Intent.END, make_viewport(offset=3, height=20), 100)
    assert v.offset == 80

    v = apply_intent(Intent.HOME, v, 100)
    assert v.offset == 0


def test_home_from_any_state():
    for offset in (0, 1, 37, 80):
        assert apply_intent(Intent.HOME, make_viewport(offset=offset), 100).offset == 0


def test_end_resets_short_document_to_zero():
    v = apply_intent(Intent.END, make_viewport(offset=0, height=10), 5)
    assert v.offset == 0


def test_page_up_floors_at_zero():
    assert apply_intent(Intent.PAGE_UP, make_viewport(offset=50), 100).offset == 30
    assert apply_intent(Intent.PAGE_UP, make_viewport(offset=7), 100).offset == 0


def test_page_down_moves_one_screen():
    v = apply_intent(Intent.PAGE_DOWN, make_viewport(offset=10), 100)
    assert v.offset == 30


def test_page_down_clamps_to_last_page():
    v = apply_intent(Intent.PAGE_DOWN, make_viewport(offset=70), 100)
    assert v.offset == 80


def test_page_down_underflow_safety():
    v = apply_intent(Intent.PAGE_DOWN, make_viewport(offset=0, height=10), 5)
    assert v.offset == 0


def test_page_down_with_exact_fit_is_noop():
    v = apply_intent(Intent.PAGE_DOWN, make_viewport(offset=0, height=10), 10)
    assert v.offset == 0


def test_mouse_scroll_down_moves_three_lines():
    v = apply_intent(Intent.MOUSE_SCROLL_DOWN, make_viewport(offset=0), 100)
    assert v.offset == 3


def test_mouse_scroll_down_clamps_to_last_page():
    v = apply_intent(Intent.MOUSE_SCROLL_DOWN, make_viewport(offset=79), 100)
    assert v.offset == 80


def test_mouse_scroll_up_moves_three_lines():
    v = apply_intent(Intent.MOUSE_SCROLL_UP, make_viewport(offset=10), 100)
    assert v.offset == 7


def test_mouse_scroll_up_floors_at_zero():
    v = apply_intent(Intent.MOUSE_SCROLL_UP, make_viewport(offset=2), 100)
    assert v.offset == 0


def test_quit_does_not_move():
    start = make_viewport(offset=12)
    assert apply_intent(Intent.QUIT, start, 100) == start


def test_dimensions_are_preserved_by_navigation():
    v = apply_intent(Intent.PAGE_DOWN, make_viewport(offset=0, height=20, width=33), 100)
    assert (v.width, v.height) == (33, 20)


def test_resize_replaces_dimensions_and_keeps_offset():
    v = resize(make_viewport(offset=42, height=20, width=80), 120, 40)
    assert v == Viewport(offset=42, width=120, height=40)


def test_resize_to_zero_is_degenerate():
    v = resize(make_viewport(), 0, 0)
    assert v.is_degenerate


@pytest.mark.parametrize("total_lines,height", [
    (0, 10),
    (5, 10),
    (10, 10),
    (11, 10),
    (100, 20),
    (1000, 7),
    (3, 1),
])
def test_offset_bounds_hold_for_random_intent_sequences(total_lines, height):
    rng = random.Random(total_lines * 31 + height)
    navigation = [i for i in Intent if i is not Intent.QUIT]
    v = make_viewport(offset=0, height=height)

    for _ in range(500):
        v = apply_intent(rng.choice(navigation), v, total_lines)
        assert v.offset >= 0
        if total_lines <= height:
            assert v.offset == 0
        else:
            assert v.offset <= total_lines - height
