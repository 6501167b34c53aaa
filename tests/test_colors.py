import pytest

from cubescape.colors import color_by_name


@pytest.mark.parametrize(
    "name, value",
    [
        ("snow", 0xfffafa),
        ("white", 0xffffff),
        ("black", 0x0),
        ("red", 0xff0000),
        ("cornflower blue", 0x6495ed),
        ("thistle4", 0x8b7b8b),
        ("gray50", 0x7f7f7f),
        ("lightgreen", 0x90ee90),
    ],
)
def test_known_names(name, value):
    assert color_by_name(name) == value


def test_none_is_transparent():
    assert color_by_name("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW"])
def test_lookup_ignores_case(name):
    assert color_by_name(name) == color_by_name("snow")


def test_repeated_names_use_first_entry():
    assert color_by_name("dark slate") == 0x2f4f4f
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xfafad2


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("navajo white", "navajowhite"),
        ("midnight blue", "midnightblue"),
        ("forest green", "forestgreen"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert color_by_name(spaced) == color_by_name(joined)


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    gray = color_by_name(f"gray{level}")
    assert gray == color_by_name(f"grey{level}")
    red, green, blue = (gray >> 16) & 0xFF, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_gray_levels_increase():
    levels = [color_by_name(f"gray{n}") for n in range(0, 101)]
    assert levels == sorted(levels)
    assert levels[0] == color_by_name("black")
    assert levels[-1] == color_by_name("white")


def test_numbered_variant_one_matches_base_where_defined():
    assert color_by_name("snow1") == color_by_name("snow")
    assert color_by_name("red1") == color_by_name("red")
    assert color_by_name("blue1") == color_by_name("blue")


@pytest.mark.parametrize("name", ["", "nocolour", "snow5", "gray101", " snow"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        color_by_name(name)