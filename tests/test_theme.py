import pytest

from theme import THEMES, ThemeAndViewport


@pytest.fixture
def viewport():
    return ThemeAndViewport(50, (700, 400), "dark")


def test_toggle_theme_twice_restores_palette(viewport):
    original = viewport.theme
    assert viewport.toggle_theme() is THEMES["light"]
    assert viewport.toggle_theme() == original


def test_palettes_are_distinct():
    assert THEMES["dark"].background != THEMES["light"].background
    assert THEMES["dark"].food == "#ef4444"


def test_fullscreen_snaps_screen_to_cells(viewport):
    assert viewport.toggle_fullscreen((1366, 768)) == (1350, 750)
    assert viewport.fullscreen
    assert viewport.grid.columns == 27
    assert viewport.grid.rows == 15


def test_fullscreen_round_trip_restores_default_exactly(viewport):
    viewport.toggle_fullscreen((1920, 1080))
    assert viewport.toggle_fullscreen((1920, 1080)) == (700, 400)
    assert not viewport.fullscreen
    assert viewport.size == viewport.default_size == (700, 400)


def test_default_size_is_snapped():
    assert ThemeAndViewport(50, (720, 430)).default_size == (700, 400)


def test_unknown_theme_rejected():
    with pytest.raises(ValueError):
        ThemeAndViewport(50, (700, 400), "sepia")
