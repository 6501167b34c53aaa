"""Header lines of a .cub scene file: wall textures and floor/ceiling colours."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

ExistsFunc = Callable[[str], bool]

_DIGITS = re.compile(r"[0-9]*")
_TEXTURE_IDS = {"NO": "north", "SO": "south", "EA": "east", "WE": "west"}
_MAX_CHANNEL = 255


class CubParseError(ValueError):
    """Raised when a .cub scene file is malformed."""


@dataclass
class MapData:
    """Everything read from a .cub file.

    start_pos is (column, row) of the player's start cell, (-1, -1) until
    one is found; map_matrix holds one list of characters per map row.
    """

    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None
    floor: int = -1
    ceiling: int = -1
    map_matrix: list[list[str]] = field(default_factory=list)
    width: int = 0
    height: int = 0
    start_pos: tuple[int, int] = (-1, -1)
    facing: str | None = None
    filename: str | None = None

    def header_complete(self) -> bool:
        """Return True once all four textures and both colours are known."""
        textures = (self.north, self.south, self.west, self.east)
        return (
            all(path is not None for path in textures)
            and self.ceiling != -1
            and self.floor != -1
        )


def _split(text: str, sep: str) -> list[str]:
    """Split on sep, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def rgb_to_int(r: str, g: str, b: str) -> int:
    """Pack three decimal channel strings (0-255) into 0xRRGGBB."""
    for part in (r, g, b):
        if not _DIGITS.fullmatch(part):
            raise CubParseError(f"colour component is not a number: {part!r}")
    red, green, blue = (int(part) if part else 0 for part in (r, g, b))
    if max(red, green, blue) > _MAX_CHANNEL:
        raise CubParseError("wrong color, number between 0 and 255 only")
    return (red << 16) | (green << 8) | blue


def _parse_rgb(spec: str) -> int:
    components = _split(spec, ",")
    if len(components) != 3:
        raise CubParseError(f"wrong floor color: {spec!r}")
    return rgb_to_int(*components)


def parse_color_line(line: str, mapdata: MapData) -> None:
    """Read an ``F r,g,b`` or ``C r,g,b`` line into mapdata."""
    parts = _split(line, " ")
    if len(parts) < 2:
        raise CubParseError("no data on floor/ceiling color line")
    if len(parts) > 2:
        raise CubParseError("too much info on floor/ceiling color line")
    ident, spec = parts
    if ident == "F" and mapdata.floor == -1:
        mapdata.floor = _parse_rgb(spec)
    elif ident == "C" and mapdata.ceiling == -1:
        mapdata.ceiling = _parse_rgb(spec)
    else:
        raise CubParseError(f"unexpected or duplicate colour line: {line!r}")


def parse_texture_line(
    parts: Sequence[str], mapdata: MapData, exists: ExistsFunc = os.path.exists
) -> None:
    """Read a ``NO|SO|EA|WE path.xpm`` line, already split into words."""
    if len(parts) > 2:
        raise CubParseError("too much info on texture path line")
    if len(parts) < 2:
        raise CubParseError("missing texture path")
    ident, path = parts
    dot = path.rfind(".")
    if dot == -1 or path[dot:] != ".xpm":
        raise CubParseError(f"error, .xpm file needed: {path!r}")
    if not exists(path):
        raise CubParseError(f"texture file not found: {path!r}")
    attr = _TEXTURE_IDS.get(ident)
    if attr is not None and getattr(mapdata, attr) is None:
        setattr(mapdata, attr, path)
    elif not ident.startswith("\n"):
        raise CubParseError(f"wrong data ID or data ID duplicates: {ident!r}")


def parse_info_line(
    line: str, mapdata: MapData, exists: ExistsFunc = os.path.exists
) -> None:
    """Read one header line, either a texture or a colour definition."""
    parts = _split(line, " ")
    if parts and parts[0][0] in "NWES":
        parse_texture_line(parts, mapdata, exists)
    elif parts and parts[0][0] in "FC":
        parse_color_line(line, mapdata)
    else:
        raise CubParseError(f"Wrong data ID on line: {line!r}")