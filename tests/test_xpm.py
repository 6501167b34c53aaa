import pytest

from cubescape.colors import color_by_name
from cubescape.xpm import (
    TRANSPARENT,
    XpmError,
    parse_xpm,
    quoted_lines,
    read_xpm_file,
    strip_comments,
    text_rgb,
    xpm_to_image,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c blue",
// pixels
".X ",
" .X"
};
"""


def test_strip_comments_keeps_length_and_removes_comments():
    stripped = strip_comments(SAMPLE)
    assert len(stripped) == len(SAMPLE)
    assert "XPM" not in stripped
    assert "columns" not in stripped
    assert "pixels" not in stripped
    assert '"X c blue"' in stripped


def test_strip_comments_leaves_quoted_text():
    text = '"a /* b */ c"'
    assert strip_comments(text) == text


def test_strip_comments_unterminated():
    with pytest.raises(XpmError):
        strip_comments("/* never closed")


def test_quoted_lines():
    assert list(quoted_lines('x "one", "two" y "three"')) == ["one", "two", "three"]


def test_quoted_lines_ignores_unpaired_quote():
    assert list(quoted_lines('"a" "b')) == ["a"]


def test_text_rgb_hex():
    assert text_rgb("#00ff00", None) == 0x00FF00


def test_text_rgb_two_word_name():
    assert text_rgb("light", "blue") == color_by_name("light blue")


def test_text_rgb_name_ignores_case():
    assert text_rgb("White", None) == color_by_name("white")


def test_text_rgb_none_and_unknown():
    assert text_rgb("None", None) == -1
    assert text_rgb("nosuchcolour", None) == 0


def test_read_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    image = read_xpm_file(path)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == color_by_name("blue")
    assert image.pixel(2, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(1, 1) == 0xFF0000


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm_file(tmp_path / "absent.xpm")


def test_none_colour_becomes_transparent_value():
    image = xpm_to_image(["1 1 1 1", "a c None", "a"])
    assert image.pixel(0, 0) == 0xFF000000
    assert image.pixel(0, 0) == TRANSPARENT


def test_two_chars_per_pixel():
    image = xpm_to_image(["2 1 2 2", "aa c #010203", "bb c #0a0b0c", "bbaa"])
    assert image.pixel(0, 0) == 0x0A0B0C
    assert image.pixel(1, 0) == 0x010203


def test_wide_codes_use_first_definition():
    image = parse_xpm(["1 1 2 3", "abc c #000011", "abc c #000022", "abc"])
    assert image.pixel(0, 0) == 0x000011


def test_narrow_codes_use_last_definition():
    image = parse_xpm(["1 1 2 1", "a c #000011", "a c #000022", "a"])
    assert image.pixel(0, 0) == 0x000022


def test_unknown_pixel_code_is_black():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 2 1 1", "a c #000000", "aa"],
        ["2 1 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_invalid_data(data):
    with pytest.raises(XpmError):
        xpm_to_image(data)