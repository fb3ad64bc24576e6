import pytest

from daedalusview.materialform import MaterialForm
from daedalusview.model import Color, ColorPalette, GuiResult, InputState, Key, Material

THEME = ColorPalette(
    white=Color(250, 250, 250),
    black=Color(10, 10, 10),
    light=Color(200, 200, 200),
    dark=Color(60, 60, 60),
    accent1=Color(200, 40, 40),
    accent2=Color(40, 40, 200),
)


@pytest.fixture
def form():
    return MaterialForm(THEME, 1000, 800)


def chord(key):
    return InputState(pressed=frozenset({key}), down=frozenset({Key.LEFT_CONTROL}))


def test_initial_texts(form):
    assert [box.text for box in form.boxes] == ["Name", "Density lbs/in^3", "R", "G", "B"]
    assert form.density_box.text_index == 15
    assert form.companion is None


def test_reset_restores_defaults(form):
    form.load_material(Material("Steel", 0.28, Color(1, 2, 3)))
    form.name_box.is_typing = True
    form.reset()
    assert [box.text for box in form.boxes] == ["Name", "Density lbs/in^3", "R", "G", "B"]
    assert not any(box.is_typing for box in form.boxes)
    assert form.companion is None


def test_to_material_appends_new(form):
    form.name_box.set_text("Steel")
    form.density_box.set_text("0.28")
    form.r_box.set_text("10")
    form.g_box.set_text("20")
    form.b_box.set_text("30")
    materials = []
    result = form.to_material(materials)
    assert materials == [result]
    assert result == Material("Steel", 0.28, Color(10, 20, 30, 255))


def test_to_material_defaults_for_unreadable_text(form):
    result = form.to_material([])
    assert result.name == "Name"
    assert result.density == 1.0
    assert result.color == Color(0, 0, 0, 255)


def test_to_material_updates_existing_without_appending(form):
    existing = Material("Old", 2.0, Color(1, 1, 1), texture="tex")
    form.load_material(existing)
    form.name_box.set_text("New")
    materials = [existing]
    result = form.to_material(materials)
    assert result is existing
    assert materials == [existing]
    assert existing.name == "New"
    assert existing.texture is None


def test_load_material_formats(form):
    form.load_material(Material("Steel", 2.5, Color(7, 8, 9)))
    assert form.density_box.text == "2.500000"
    assert form.r_box.text == "7"
    assert form.name_box.text_index == len("Steel")


def test_round_trip(form):
    original = Material("Oak", 0.025, Color(120, 80, 40, 255))
    form.load_material(original)
    fresh = MaterialForm(THEME, 1000, 800)
    for src, dst in zip(form.boxes, fresh.boxes):
        dst.set_text(src.text)
    assert fresh.to_material([]) == original


def test_tab_cycles_focus(form):
    tab = InputState(pressed=frozenset({Key.TAB}))
    assert form.update(tab) is GuiResult.TYPING
    assert form.name_box.is_typing
    form.b_box.set_text("5\t")
    form.name_box.is_typing = False
    form.b_box.is_typing = True
    form.update(tab)
    assert form.b_box.text == "5"
    assert form.name_box.is_typing


@pytest.mark.parametrize(
    "key, expected",
    [(Key.S, GuiResult.SAVE), (Key.A, GuiResult.CANCEL), (Key.D, GuiResult.DELETE)],
)
def test_shortcuts(form, key, expected):
    assert form.update(chord(key)) is expected


def test_idle_does_nothing(form):
    assert form.update(InputState()) is GuiResult.NOTHING


def test_click_delete(form):
    r = form.delete_button.rect
    centre = (r.x + r.width / 2, r.y + r.height / 2)
    form.update(InputState(mouse=centre, mouse_pressed=True))
    assert form.update(InputState(mouse=centre, mouse_released=True)) is GuiResult.DELETE