import numpy as np
import pytest

from asciiart.errors import EmptyIndexError
from asciiart.glyph_index import GlyphBrightnessIndex

from tests.conftest import InkRenderer


def test_half_brightness_ties_to_darker_glyph(make_index):
    index = make_index(".#")
    assert index.lookup(0.5) == "."


def test_near_bright_maps_to_bright_glyph(make_index):
    index = make_index(".#")
    assert index.lookup(0.9) == "#"


def test_extremes_map_to_extreme_glyphs(make_index):
    index = make_index(".-#")
    assert index.lookup(0.0) == "."
    assert index.lookup(1.0) == "#"
    assert index.lookup(0.5) == "-"


def test_brightness_is_ink_fraction(make_index):
    index = make_index(".-#")
    assert index.brightness(".") == 0.0
    assert index.brightness("-") == 0.5
    assert index.brightness("#") == 1.0


def test_lookup_rescales_onto_glyph_range():
    renderer = InkRenderer({"a": 64, "b": 128, "c": 192})
    index = GlyphBrightnessIndex(renderer, "abc")
    # Keys span 0.25..0.75, so 0.0 and 1.0 land on the ends of that span
    assert index.lookup(0.0) == "a"
    assert index.lookup(1.0) == "c"
    assert index.lookup(0.5) == "b"
    # 0.3 -> 0.25 + 0.3 * 0.5 = 0.4, nearer 0.5 than 0.25
    assert index.lookup(0.3) == "b"


def test_single_glyph_always_returned(make_index):
    index = make_index("-")
    for value in (0.0, 0.3, 1.0):
        assert index.lookup(value) == "-"


def test_empty_index_raises(make_index):
    index = make_index("")
    with pytest.raises(EmptyIndexError):
        index.lookup(0.5)


def test_empty_after_removing_everything(make_index):
    index = make_index(".#")
    index.remove(".")
    index.remove("#")
    assert len(index) == 0
    assert index.keys() == ()
    with pytest.raises(EmptyIndexError):
        index.lookup(0.1)


def test_equal_brightness_glyphs_share_a_key():
    renderer = InkRenderer({"x": 100, "b": 100, "m": 100, " ": 0})
    index = GlyphBrightnessIndex(renderer, "xbm ")
    assert len(index.keys()) == 2
    assert index.groups()[100 / 256] == ("b", "m", "x")
    # Lowest code point wins within a group
    assert index.lookup(1.0) == "b"


def test_add_is_idempotent(make_index):
    index = make_index(".#")
    before = index.groups()
    index.add("#")
    assert index.groups() == before
    assert len(index) == 2


def test_add_then_remove_restores_groups(make_index):
    index = make_index(".-#")
    before = index.groups()
    index.add("Q")
    assert "Q" in index
    index.remove("Q")
    assert index.groups() == before
    assert "Q" not in index


def test_remove_last_in_group_drops_key(make_index):
    index = make_index(".-#")
    index.remove("-")
    assert index.keys() == (0.0, 1.0)


def test_remove_keeps_key_with_remaining_glyphs():
    renderer = InkRenderer({"a": 10, "b": 10, "c": 200})
    index = GlyphBrightnessIndex(renderer, "abc")
    index.remove("a")
    assert index.groups()[10 / 256] == ("b",)


def test_remove_unknown_is_noop(make_index):
    index = make_index(".#")
    before = index.groups()
    index.remove("z")
    assert index.groups() == before


def test_brightness_rendered_once(renderer):
    index = GlyphBrightnessIndex(renderer, ".#")
    index.remove("#")
    index.add("#")
    index.add("#")
    assert renderer.calls.count("#") == 1


def test_rejects_multi_character_glyph(make_index):
    index = make_index()
    with pytest.raises(ValueError, match="single character"):
        index.add("ab")


def test_glyphs_sorted_by_code_point(make_index):
    index = make_index("#-.")
    assert index.glyphs == ["#", "-", "."]
    assert list(index) == ["#", "-", "."]


def test_lookup_monotonic_in_brightness():
    renderer = InkRenderer()
    index = GlyphBrightnessIndex(renderer, "0123456789abcdef .:#@")
    previous = -1.0
    for value in np.linspace(0.0, 1.0, 201):
        glyph_brightness = index.brightness(index.lookup(float(value)))
        assert glyph_brightness >= previous
        previous = glyph_brightness


def test_lookup_grid_shape(make_index):
    index = make_index(".#")
    grid = np.array([[0.0, 1.0, 0.9], [0.2, 0.8, 0.5]])
    assert index.lookup_grid(grid) == [".##", ".#."]
