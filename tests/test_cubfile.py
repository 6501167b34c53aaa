import pytest

from cubescape.cubfile import (
    check_cell,
    cub_parser,
    fill_map_row,
    parse_lines,
    read_cub,
    validate_map,
)
from cubescape.scene import CubParseError, MapData, rgb_to_int

HEADER = [
    "NO ./n.xpm\n",
    "SO ./s.xpm\n",
    "WE ./w.xpm\n",
    "EA ./e.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]

GOOD_MAP = ["111111\n", "100001\n", "10N001\n", "111111\n"]


def always(_path):
    return True


def write_cub(tmp_path, lines, name="level.cub"):
    path = tmp_path / name
    path.write_text("".join(lines))
    return path


def test_parse_lines_reads_header_and_map():
    data = parse_lines(HEADER + GOOD_MAP, always)
    assert data.north == "./n.xpm"
    assert data.floor == rgb_to_int("220", "100", "0")
    assert data.ceiling == rgb_to_int("225", "30", "0")
    assert data.height == len(GOOD_MAP)
    assert data.width == len("111111")
    assert data.map_matrix[2] == list("10N001")
    assert data.start_pos == (2, 2)
    assert data.facing == "N"


def test_valid_map_passes_validation():
    data = parse_lines(HEADER + GOOD_MAP, always)
    validate_map(data)
    assert data.start_pos == (2, 2)


def test_blank_line_inside_map_is_skipped():
    lines = HEADER + GOOD_MAP[:2] + ["\n"] + GOOD_MAP[2:]
    data = parse_lines(lines, always)
    assert data.height == len(GOOD_MAP)
    assert data.map_matrix[2] == list("10N001")


def test_map_before_header_complete_is_rejected():
    with pytest.raises(CubParseError):
        parse_lines(HEADER[:5] + GOOD_MAP, always)


def test_fill_map_row_tracks_widest_row():
    data = MapData()
    fill_map_row(0, "111", data)
    fill_map_row(1, "11111\n", data)
    assert data.width == 5
    assert data.map_matrix == [list("111"), list("11111")]


def test_fill_map_row_rejects_long_line():
    with pytest.raises(CubParseError):
        fill_map_row(0, "1" * 256, MapData())


def test_fill_map_row_rejects_invalid_char():
    with pytest.raises(CubParseError):
        fill_map_row(0, "10X1", MapData())


def test_fill_map_row_rejects_second_start():
    data = MapData()
    fill_map_row(0, "1N1", data)
    with pytest.raises(CubParseError):
        fill_map_row(1, "1S1", data)
    assert data.facing == "N"


def test_check_cell_ignores_walls_and_catches_edges():
    data = parse_lines(HEADER + GOOD_MAP, always)
    check_cell(data, 0, 0)
    data.map_matrix[1][0] = "0"
    with pytest.raises(CubParseError):
        check_cell(data, 0, 1)


def test_open_map_next_to_space_is_rejected():
    lines = HEADER + ["111111\n", "100001\n", "10N001\n", "11 111\n"]
    data = parse_lines(lines, always)
    with pytest.raises(CubParseError):
        validate_map(data)


def test_floor_on_last_row_is_rejected():
    lines = HEADER + ["111111\n", "10N001\n", "100001\n"]
    data = parse_lines(lines, always)
    with pytest.raises(CubParseError):
        validate_map(data)


def test_map_without_start_is_rejected():
    lines = HEADER + ["1111\n", "1001\n", "1111\n"]
    data = parse_lines(lines, always)
    with pytest.raises(CubParseError):
        validate_map(data)


def test_read_cub_records_filename(tmp_path):
    path = write_cub(tmp_path, HEADER + GOOD_MAP)
    data = read_cub(path, always)
    assert data.filename == str(path)
    assert data.height == len(GOOD_MAP)


def test_read_cub_missing_file(tmp_path):
    with pytest.raises(CubParseError):
        read_cub(tmp_path / "absent.cub", always)


def test_read_cub_uses_real_texture_files(tmp_path):
    textures = {}
    for ident in ("NO", "SO", "WE", "EA"):
        texture = tmp_path / f"{ident}.xpm"
        texture.write_text("")
        textures[ident] = str(texture)
    header = [f"{ident} {path}\n" for ident, path in textures.items()]
    path = write_cub(tmp_path, header + ["F 1,2,3\n", "C 4,5,6\n"] + GOOD_MAP)
    data = read_cub(path)
    assert data.west == textures["WE"]


def test_cub_parser_returns_valid_map(tmp_path):
    path = write_cub(tmp_path, HEADER + GOOD_MAP)
    data = cub_parser(["game", str(path)], always)
    assert data.facing == "N"
    assert data.map_matrix[0] == list("111111")


@pytest.mark.parametrize("argv", [["game"], ["game", "a.cub", "b.cub"], ["game", "a.txt"], ["game", "nodot"]])
def test_cub_parser_argument_errors(argv):
    with pytest.raises(CubParseError):
        cub_parser(argv, always)


def test_cub_parser_rejects_invalid_map(tmp_path):
    path = write_cub(tmp_path, HEADER + ["1111\n", "1001\n", "1111\n"])
    with pytest.raises(CubParseError):
        cub_parser(["game", str(path)], always)