"""String literal escapes used by Godot text assets."""

import re

# One escape per match; anything that is not a backslash is left alone.
# A \u high surrogate directly followed by a \u low surrogate is one escape.
ESCAPE_PATTERN = re.compile(
    r"\\u([Dd][89ABab][0-9A-Fa-f]{2})\\u([Dd][C-Fc-f][0-9A-Fa-f]{2})"
    r'|\\(["bfnrt\\]|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{6})|(\\)\Z|\\(.)',
    re.DOTALL,
)

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ENCODE_ESCAPES = {value: "\\" + key for key, value in _SIMPLE_ESCAPES.items()}


def _decode_escape(match: re.Match[str]) -> str:
    high, low, code, dangling, other = match.groups()
    if high is not None:
        return chr(0x10000 + ((int(high, 16) - 0xD800) << 10) + (int(low, 16) - 0xDC00))
    if code is None:
        # Dangling backslash, or a backslash before an unknown character.
        return dangling or other
    if code in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[code]
    value = int(code[1:], 16)
    if value > 0x10FFFF:
        return code
    return chr(value)


def unescape_string(part_inside_quotes: str) -> str:
    """Decode the body of a quoted string literal.

    Recognizes ``\\"``, ``\\\\``, ``\\n``, ``\\t``, ``\\r``, ``\\b``, ``\\f``,
    ``\\uXXXX`` (surrogate pairs included) and ``\\UXXXXXX``. A backslash
    before any other character is dropped, and a backslash at the very end
    is kept as is.

    Args:
        part_inside_quotes: Text between (not including) the quotes.

    Returns:
        The literal value. Text without backslashes is returned unchanged.
    """
    if "\\" not in part_inside_quotes:
        return part_inside_quotes
    return ESCAPE_PATTERN.sub(_decode_escape, part_inside_quotes)


def escape_string(value: str) -> str:
    """Encode a literal value so that :func:`unescape_string` restores it."""
    return "".join(_ENCODE_ESCAPES.get(char, char) for char in value)
