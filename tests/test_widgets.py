import pytest

from daedalusview.model import Color, ColorPalette, InputState, Rect
from daedalusview.widgets import Button, make_button, wrap_text

THEME = ColorPalette(
    white=Color(250, 250, 250),
    black=Color(10, 10, 10),
    light=Color(200, 200, 200),
    dark=Color(60, 60, 60),
    accent1=Color(255, 0, 0),
    accent2=Color(0, 0, 255),
)

RECT = Rect(0, 0, 100, 40)
INSIDE = (50, 20)
OUTSIDE = (500, 500)


def button(toggle=False):
    b = make_button(RECT, "Save", THEME.accent1, THEME)
    b.is_toggle = toggle
    return b


def test_text_color_contrasts_with_fill():
    assert make_button(RECT, "x", THEME.white, THEME).text_color == THEME.black
    assert make_button(RECT, "x", THEME.dark, THEME).text_color == THEME.white


def test_press_then_release_restores_full_colour():
    b = Button("x", RECT, Color(255, 255, 255), Color(0, 0, 0))
    b.press()
    assert b.is_pressed
    assert b.color.r < 255
    b.release()
    assert not b.is_pressed
    assert b.color == Color(255, 255, 255)


def test_click_and_release_inside_fires():
    b = button()
    assert b.poll(InputState(mouse=INSIDE, mouse_pressed=True)) is False
    assert b.is_pressed and b.is_selected
    assert b.poll(InputState(mouse=INSIDE, mouse_released=True)) is True
    assert not b.is_pressed


def test_release_outside_does_not_fire():
    b = button()
    b.poll(InputState(mouse=INSIDE, mouse_pressed=True))
    assert b.poll(InputState(mouse=OUTSIDE, mouse_released=True)) is False
    assert not b.is_pressed
    assert not b.is_selected


def test_toggle_fires_on_each_click():
    b = button(toggle=True)
    assert b.poll(InputState(mouse=INSIDE, mouse_pressed=True)) is True
    assert b.is_pressed
    assert b.poll(InputState(mouse=INSIDE, mouse_released=True)) is False
    assert b.is_pressed
    assert b.poll(InputState(mouse=INSIDE, mouse_pressed=True)) is True
    assert not b.is_pressed


def test_pressed_button_draws_smaller():
    b = button()
    b.press()
    assert b.draw_rect.width < RECT.width
    assert b.draw_rect.height < RECT.height


def test_fit_text_fits_inside_button():
    b = button()

    def measure(text, size, spacing):
        return (len(text) * size * 0.6 + spacing, size)

    layout = b.fit_text(measure)
    w, h = measure(b.text, layout.size, layout.spacing)
    assert w + RECT.width / 10 <= RECT.width
    assert h + RECT.height / 10 <= RECT.height
    assert layout.x == pytest.approx((RECT.width - w) / 2)


def test_wrap_splits_on_newlines():
    assert wrap_text("one\ntwo\nthree", 5) == ["one", "two", "three"]


def test_wrap_limits_rows():
    assert wrap_text("a\nb\nc\nd", 2) == ["a", "b"]


def test_wrap_long_line_lengths():
    lines = wrap_text("x" * 100, 10)
    assert all(len(line) <= 31 for line in lines)
    assert len(lines[0]) == 31


def test_wrap_empty():
    assert wrap_text("", 3) == []