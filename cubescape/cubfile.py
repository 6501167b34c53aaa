"""Reading and validating .cub scene files: header, then the map grid."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from cubescape.scene import CubParseError, ExistsFunc, MapData, parse_info_line

MAP_CHARS = frozenset(" 01NSEW$P")
START_CHARS = "NSEW"
OPEN_CHARS = "NSEW$"
MAX_LINE = 255


def fill_map_row(row: int, line: str, mapdata: MapData) -> None:
    """Store one map line as row `row` of the grid, recording the start cell."""
    if len(line) > MAX_LINE:
        raise CubParseError(f"map line {row} is longer than {MAX_LINE} characters")
    line = line.split("\n", 1)[0]
    for col, char in enumerate(line):
        if char not in MAP_CHARS:
            raise CubParseError(f"Invalid character {char!r} in map design section")
        if char in START_CHARS:
            if mapdata.start_pos[0] != -1:
                raise CubParseError("starter pos duplicate")
            mapdata.facing = char
            mapdata.start_pos = (col, row)
    while len(mapdata.map_matrix) <= row:
        mapdata.map_matrix.append([])
    mapdata.map_matrix[row] = list(line)
    mapdata.width = max(mapdata.width, len(line))


def _cell(mapdata: MapData, x: int, y: int) -> str:
    """Return the character at (x, y), or "" where nothing was stored."""
    if 0 <= y < len(mapdata.map_matrix):
        row = mapdata.map_matrix[y]
        if 0 <= x < len(row):
            return row[x]
    return ""


def check_cell(mapdata: MapData, x: int, y: int) -> None:
    """Raise if a walkable cell at (x, y) touches the edge or empty space."""
    cell = _cell(mapdata, x, y)
    if not (cell == "0" or (cell and cell in OPEN_CHARS)):
        return
    error = CubParseError(f"Invalid map on (x,y): ({x},{y})")
    if y == 0 or x == 0 or y == mapdata.height or x == mapdata.width:
        raise error
    for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
        if _cell(mapdata, nx, ny) in ("", " "):
            raise error


def validate_map(mapdata: MapData) -> None:
    """Raise unless the map has a start cell and is closed by walls."""
    if -1 in mapdata.start_pos:
        raise CubParseError("Invalid map: no start position")
    # Rows are scanned up to the map width, as the scene format's checker does.
    for y in range(mapdata.width):
        for x in range(mapdata.width):
            check_cell(mapdata, x, y)


def parse_lines(lines: Iterable[str], exists: ExistsFunc = os.path.exists) -> MapData:
    """Build MapData from the lines of a .cub file, each ending in a newline."""
    mapdata = MapData()
    in_map = False
    for line in lines:
        if not line or line[0] == "\0":
            break
        if len(line) == 1 or (line[0] == "\n" and not in_map):
            continue
        if not in_map:
            line = line.split("\n", 1)[0]
        if not mapdata.header_complete():
            parse_info_line(line, mapdata, exists)
            continue
        in_map = True
        if line[0] == "\n":
            raise CubParseError("Empty line on map section forbidden")
        fill_map_row(mapdata.height, line, mapdata)
        mapdata.height += 1
    return mapdata


def _split_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def read_cub(path: str | os.PathLike[str], exists: ExistsFunc = os.path.exists) -> MapData:
    """Read a .cub file without validating its map."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise CubParseError(f"cannot open {os.fspath(path)!r}: {exc.strerror}") from exc
    mapdata = parse_lines(_split_lines(text), exists)
    mapdata.filename = os.fspath(path)
    return mapdata


def cub_parser(argv: Sequence[str], exists: ExistsFunc = os.path.exists) -> MapData:
    """Read and validate the map named by argv, given as [program, path.cub]."""
    if len(argv) != 2:
        raise CubParseError("expected exactly one .cub file argument")
    path = argv[1]
    dot = path.rfind(".")
    if dot == -1 or path[dot:] != ".cub":
        raise CubParseError("wrong filetype, .cub needed")
    mapdata = read_cub(path, exists)
    validate_map(mapdata)
    return mapdata