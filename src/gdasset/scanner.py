"""Line scanner that turns asset text into symbols, strings and comments.

The scanner walks the document line by line and, within a line, fragment by
fragment. At column 0 it looks for a section header or a property key; after
that it consumes comments, quoted strings (which may span lines), whitespace
and bare tokens, growing the range of the open property as it goes.

Scanning never raises: text that does not look like any construct is read as
bare tokens, and an unterminated string ends the scan with the symbols found
so far.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from gdasset.document import AssetDocument
from gdasset.escapes import unescape_string
from gdasset.models import (
    CommentToken,
    DocumentState,
    Position,
    Span,
    StringToken,
    Symbol,
    SymbolKind,
)
from gdasset.references import ReferenceResolver
from gdasset.sections import section_symbol

logger = logging.getLogger(__name__)

# [tag attr=value ...] ; optional comment
HEADER_PATTERN = re.compile(
    r'^\s*(\[\s*([\w-]+(?:\s+[\w-]+|\s+"[^"\\]*")*(?=\s*\])|[^[\]\s]+)'
    r"\s*([^;#]*?)\s*([\]{[(=]))\s*([;#].*)?$"
)

# dotted.key[index] =
PROPERTY_PATTERN = re.compile(
    r"^\s*(((?:[\w-]+[./])*[\w-]+)(?:\s*\[([\w\\/.:!@$%+-]+)\])?)\s*="
)

# Nothing left on the line but whitespace and maybe a comment
BLANK_PATTERN = re.compile(r"^(\s*)([;#].*)?$")

WHITESPACE_PATTERN = re.compile(r"^\s+")

TOKEN_PATTERN = re.compile(r'^[^"\s]+')


class StringScan(Enum):
    SCANNING = "scanning"
    CLOSED = "closed"
    UNTERMINATED = "unterminated"


@dataclass
class ScanState:
    """Cursor and open constructs of one scan.

    Attributes:
        line: Current line.
        column: Current column within the line.
        section: Section symbol whose body is being read.
        prop: Property symbol whose value is being read.
        previous_end: End of the last consumed fragment.
        symbols: Top-level symbols found so far.
    """

    line: int = 0
    column: int = 0
    section: Symbol | None = None
    prop: Symbol | None = None
    previous_end: Position | None = None
    symbols: list[Symbol] = field(default_factory=list)

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)


def scan_string(document: AssetDocument, line: int, column: int) -> tuple[StringScan, Position, str]:
    """Read a quoted string starting at its opening quote.

    Line breaks inside the quotes belong to the string; a backslash escapes
    the next character (including a quote).

    Args:
        document: Document to read.
        line: Line of the opening quote.
        column: Column of the opening quote.

    Returns:
        A tuple of final state, the position just past the closing quote (or
        the end of the document) and the decoded value.
    """
    status = StringScan.SCANNING
    raw_lines: list[str] = []
    start = column + 1
    text = document.line_at(line)
    while status is StringScan.SCANNING:
        index = start
        while index < len(text) and text[index] != '"':
            index += 2 if text[index] == "\\" else 1
        if index < len(text):
            raw_lines.append(text[start:index])
            column = index + 1
            status = StringScan.CLOSED
        elif line + 1 >= document.line_count:
            raw_lines.append(text[start:])
            column = len(text)
            status = StringScan.UNTERMINATED
        else:
            raw_lines.append(text[start:])
            line += 1
            start = 0
            text = document.line_at(line)
    # Escapes may span a line break ("\" at the end of a line)
    return status, Position(line, column), unescape_string("\n".join(raw_lines))


def scan(document: AssetDocument) -> DocumentState:
    """Parse a whole document.

    Args:
        document: Document to parse.

    Returns:
        A new DocumentState with top-level symbols, string and comment tokens
        and the resource tables. On an unterminated string the state holds
        everything found before it.
    """
    doc_state = DocumentState(uri=document.uri, version=document.version, refs=ReferenceResolver())
    state = ScanState()
    line_count = document.line_count

    while state.line < line_count:
        start_line = state.line
        line_text = document.line_at(start_line)
        text = line_text[state.column:]
        line_end = Position(start_line, len(line_text))

        if state.column == 0:
            header = HEADER_PATTERN.match(text)
            if header:
                _open_section(state, doc_state, header, line_end)
                continue
            prop = PROPERTY_PATTERN.match(text)
            if prop:
                _open_property(state, prop, line_end)
                continue

        blank = BLANK_PATTERN.match(text)
        if blank:
            indent, comment = blank.groups()
            if comment:
                start = Position(start_line, state.column + len(indent))
                doc_state.comments.append(CommentToken(Span(start, line_end), comment))
            state.previous_end = line_end
            state.line += 1
            state.column = 0
            continue

        if text.startswith('"'):
            status, end, value = scan_string(document, start_line, state.column)
            if status is StringScan.UNTERMINATED:
                logger.debug(
                    "Unterminated string at %d:%d in %s", start_line, state.column, document.uri
                )
                break
            doc_state.strings.append(StringToken(Span(state.position, end), value))
            state.line, state.column = end.line, end.column
        else:
            fragment = WHITESPACE_PATTERN.match(text) or TOKEN_PATTERN.match(text)
            state.column += len(fragment.group(0))

        if state.prop is not None:
            end = state.position if state.line > start_line else line_end
            state.prop.range = Span(state.prop.range.start, end)
        state.previous_end = state.position

    if state.section is not None and state.previous_end is not None:
        state.section.range = Span(state.section.range.start, state.previous_end)

    doc_state.symbols = state.symbols
    return doc_state


def _open_section(state: ScanState, doc_state: DocumentState, header: re.Match[str], line_end: Position) -> None:
    if state.section is not None and state.previous_end is not None:
        state.section.range = Span(state.section.range.start, state.previous_end)

    line = line_end.line
    span = Span(Position(line, 0), line_end)
    selection = Span(Position(line, header.start(1)), Position(line, header.end(1)))
    state.section = section_symbol(header.group(2), header.group(3), span, selection, doc_state)
    state.symbols.append(state.section)
    state.prop = None
    state.previous_end = line_end
    state.line += 1
    state.column = 0


def _open_property(state: ScanState, prop: re.Match[str], line_end: Position) -> None:
    line = line_end.line
    name, key, index = prop.groups()
    start = Position(line, prop.start(1))
    span = Span(start, line_end)
    siblings = state.section.children if state.section is not None else state.symbols

    if index:
        group_name = f"{key}[]"
        group = next((symbol for symbol in siblings if symbol.name == group_name), None)
        if group is None:
            group = Symbol(group_name, "", SymbolKind.ARRAY, span, span)
            siblings.append(group)
        group.range = group.range.extend_to(line_end)
        siblings = group.children

    if state.section is not None:
        state.section.range = state.section.range.extend_to(line_end)

    selection = Span(start, Position(line, prop.end(1)))
    state.prop = Symbol(name, "", SymbolKind.PROPERTY, span, selection)
    siblings.append(state.prop)
    state.column = prop.end(0)
    state.previous_end = state.position
