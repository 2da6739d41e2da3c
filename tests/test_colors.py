import pytest

from omwkit.color import Color
from omwkit.colors import ARGB, WINDOWS_ARGB, by_name, windows_by_name


def test_red_value():
    assert by_name("red").to_argb() == 0xFFFF0000


def test_alice_blue_value():
    assert by_name("aliceBlue").to_argb() == 0xFFF0F8FF


def test_windows_highlight_value():
    assert windows_by_name("highlight").to_argb() == 0xFF0078D7


def test_transparent_has_zero_alpha():
    color = by_name("transparent")
    assert color.a == 0
    assert color.to_argb() == 0x00FFFFFF
    assert color.is_valid()


@pytest.mark.parametrize("name", ["aliceBlue", "alice_blue", "AliceBlue", "alice blue", "ALICE-BLUE"])
def test_name_spellings(name):
    assert by_name(name) == by_name("aliceBlue")


def test_aliases_equal():
    assert by_name("aqua") == by_name("cyan")
    assert by_name("fuchsia") == by_name("magenta")


@pytest.mark.parametrize("name,argb", list(ARGB.items()))
def test_all_named_match_table(name, argb):
    color = by_name(name)
    assert color.is_valid()
    assert color.to_argb() == argb


@pytest.mark.parametrize("name,argb", list(WINDOWS_ARGB.items()))
def test_all_windows_match_table(name, argb):
    color = windows_by_name(name)
    assert color.is_valid()
    assert color.to_argb() == argb


def test_opaque_except_transparent():
    opaque = [name for name, argb in ARGB.items() if argb >> 24 != 0xFF]
    assert opaque == ["transparent"]


def test_returned_colour_is_fresh():
    first = by_name("white")
    first.transparent()
    assert first.a == 0
    assert by_name("white").a == 0xFF


def test_matches_color_constructor():
    assert by_name("green") == Color.from_rgb(0x008000)


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        by_name("notAColour")


def test_unknown_windows_name_raises():
    with pytest.raises(KeyError):
        windows_by_name("red")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ARGB["red"] = 0  # type: ignore[index]
    assert by_name("red").to_argb() == 0xFFFF0000