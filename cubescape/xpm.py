"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from cubescape.colors import color_by_name
from cubescape.image import Image
from cubescape.wordtab import find_outside_quotes, split_words

TRANSPARENT = 0xFF000000
"""Pixel value written for the colour ``None``."""

_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_INT = re.compile(r"\s*([+-]?\d+)")
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length."""
    while (begin := find_outside_quotes(text, "/*", len(text))) != -1:
        end = text.find("*/", begin + 2)
        if end == -1:
            raise XpmError("unterminated comment")
        stop = end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_outside_quotes(text, "//", len(text))) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_rgb(name: str, end: str | None) -> int:
    """Return the colour of an XPM colour spec: ``#hex`` or a colour name.

    When end is given, the name is ``name end`` (two-word names).
    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in text, in order."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what} line") from None


def _read_palette(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    # Short codes keep the last definition of a key, long codes the first.
    keep_last = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in line: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"missing colour after key in line: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_rgb(words[index], end)
        key = line[:cpp]
        if keep_last:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM string contents: header, colours, then pixel rows."""
    it = iter(lines)
    header = split_words(_next_line(it, "header"))
    values = [_atoi(word) for word in header[:4]]
    if len(values) < 4 or any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")
    width, height, ncolors, cpp = values
    palette = _read_palette(it, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(it, "pixel")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} too short")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.set_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from XPM data already split into its strings."""
    return parse_xpm(data)


def read_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))