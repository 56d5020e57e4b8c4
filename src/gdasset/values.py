"""Helpers for values found in asset documents.

Godot writes floats with a few special codes (``nan``, ``inf``, ``inf_neg``),
addresses resources by virtual paths such as ``res://`` and refers to
sub-resources as ``<file>::<id>``.
"""

import math
import re
from typing import NamedTuple
from urllib.parse import unquote, urlparse

# Pattern splitting "res://dir/title.ext::sub" into title, ext and sub path
FILENAME_PATTERN = re.compile(r"^(?:.*[/\\])?([^/\\]*?)(\.[^./\\<>:]*)?(::.*)?$")

PATH_WORD_PATTERN = re.compile(r'^(?:res|user|uid|file)://[^"\\]*$')

# [ext_resource ... path="<word>", up to and including the closing quote
EXT_RESOURCE_PATH_PATTERN = re.compile(r'^\s*\[\s*ext_resource\s+[^\n;#]*?\bpath\s*=\s*"[^"\\]*"$')

PRELOADABLE_PATTERN = re.compile(r"^(?:res|uid)://")

# Color(...) or a color array constructor, arguments in group 2
COLOR_PATTERN = re.compile(r"\b((?:Color|P(?:acked|ool)ColorArray)\s*\(\s*)([\s,\w.+-]*?)\s*\)")

# Packed vector or color array, vector size in group 2, arguments in group 4
ARRAY_PATTERN = re.compile(r"\b(P(?:acked|ool)(?:Vector([234])|Color)Array)(\s*\(\s*)([\s,\w.+-]*?)\s*\)")

# Up to N comma-separated numbers: one vector or color of a flat array
ITEM_PATTERNS = {
    size: re.compile(rf"(?:[\w.+-]+\s*,\s*){{0,{size - 1}}}[\w.+-]+") for size in (2, 3, 4)
}

ARGUMENT_SEPARATOR = re.compile(r"\s*,\s*")


class FileName(NamedTuple):
    title: str
    ext: str | None
    sub_path: str | None


def float_value(code: str) -> float | None:
    """Read a float literal, including Godot's special codes.

    Returns:
        The value, or None when ``code`` is not a number.
    """
    if code == "nan":
        return math.nan
    if code == "inf":
        return math.inf
    if code == "inf_neg":
        return -math.inf
    try:
        return float(code)
    except ValueError:
        return None


def float16_code(value: float) -> str:
    """Write a float the way Godot does, with 6 significant digits."""
    if math.isnan(value):
        return "nan"
    if value == math.inf:
        return "inf"
    if value == -math.inf:
        return "inf_neg"
    rounded = float(f"{value:.6g}")
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def filename(res_path: str) -> FileName | None:
    """Split a resource path into file title, extension and sub path."""
    match = FILENAME_PATTERN.match(res_path)
    if match is None:
        return None
    return FileName(*match.groups())


def is_path_word(word: str, line: str | None = None, column: int | None = None) -> bool:
    """Check whether a word names a file.

    A word is a path when it is a ``res://``, ``user://``, ``uid://`` or
    ``file://`` URL, or, given the line it was found on, when it is the
    quoted ``path`` of an ``ext_resource`` header (relative paths included).

    Args:
        word: The word itself, without quotes.
        line: Text of the line holding the word.
        column: Column of the word's first character on ``line``.
    """
    if PATH_WORD_PATTERN.match(word):
        return True
    if line is None or not column:
        return False
    before = line[:column + len(word) + 1]
    return line[column - 1] == '"' and EXT_RESOURCE_PATH_PATTERN.match(before) is not None


def color_components(args: str, alpha: float = 1.0) -> tuple[float, float, float, float]:
    """Read ``r, g, b[, a]`` constructor arguments.

    Missing or unreadable color channels are NaN; a missing or unreadable
    alpha is ``alpha``.
    """
    values = [float_value(code) for code in ARGUMENT_SEPARATOR.split(args.strip())[:4]]
    values += [None] * (4 - len(values))
    red, green, blue = (math.nan if value is None else value for value in values[:3])
    return red, green, blue, alpha if values[3] is None else values[3]


def color_args(red: float, green: float, blue: float, alpha: float = 1.0) -> str:
    """Constructor arguments for a color, as Godot writes them."""
    return ", ".join(float16_code(channel) for channel in (red, green, blue, alpha))


def color_label(red: float, green: float, blue: float, alpha: float = 1.0) -> str:
    """``#RRGGBBAA`` for in-range colors, else the ``Color(...)`` code."""
    channels = (red, green, blue, alpha)
    if all(0 <= channel <= 1 for channel in channels):
        return "#" + "".join(f"{int(channel * 255 + 0.5):02X}" for channel in channels)
    return f"Color({color_args(*channels)})"


def _escape_code(text: str) -> str:
    return re.sub(r'("|\\)', r"\\\1", text)


def load_code(res_path: str, resource_id: str | None = None, type: str | None = None) -> str:
    """GDScript code that loads a resource.

    Args:
        res_path: Resource path of the file.
        resource_id: Sub-resource id within the file, if any.
        type: Declared type, appended as an ``as`` cast.

    Returns:
        ``preload(...)``/``load(...)`` code for resources, or a
        ``FileAccess.open(...)`` call for plain files.
    """
    if type or resource_id is not None or PRELOADABLE_PATTERN.match(res_path):
        if resource_id is not None:
            code = f'load("{res_path}::{resource_id}")'
        else:
            code = f'preload("{res_path}")'
        if type:
            code += f" as {type}"
        return code
    if res_path.startswith("file://"):
        res_path = unquote(urlparse(res_path).path)
    return f'FileAccess.open("{_escape_code(res_path)}", FileAccess.READ)'
