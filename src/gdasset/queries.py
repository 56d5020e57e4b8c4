"""Queries used by editor features (outline, hover, go-to-definition)."""

import re
from bisect import bisect_right
from collections.abc import Callable

from gdasset.document import AssetDocument
from gdasset.escapes import unescape_string
from gdasset.exceptions import ReferenceKeywordError
from gdasset.index import DocumentIndex
from gdasset.models import ColorValue, DocumentState, Position, ResourceDescriptor, ResourceRef, Span, Symbol
from gdasset.references import KEYWORDS
from gdasset.values import ARRAY_PATTERN, COLOR_PATTERN, ITEM_PATTERNS, color_components, is_path_word

QUOTED_PATTERN = re.compile(r'"([^"\\]*)"')


def _document_text(document: AssetDocument) -> tuple[str, Callable[[int], Position]]:
    """Whole text of a document and a mapping from offsets to positions."""
    lines = [document.line_at(line) for line in range(document.line_count)]
    starts = [0]
    for text in lines[:-1]:
        starts.append(starts[-1] + len(text) + 1)

    def position_at(offset: int) -> Position:
        line = bisect_right(starts, offset) - 1
        return Position(line, offset - starts[line])

    return "\n".join(lines), position_at


class AssetQueries:
    """Read-only questions about documents, answered from a DocumentIndex.

    Every query parses the document first when the index has no state for
    its current version.

    Args:
        index: Index to use. A private one is created when omitted.
    """

    def __init__(self, index: DocumentIndex | None = None) -> None:
        self.index = index if index is not None else DocumentIndex()

    def parse(self, document: AssetDocument) -> DocumentState:
        return self.index.parse(document)

    def close(self, document: AssetDocument) -> bool:
        return self.index.close(document.uri)

    def symbol_tree(self, document: AssetDocument) -> list[Symbol]:
        """Top-level symbols in source order."""
        return self.parse(document).symbols

    def is_in_string(self, document: AssetDocument, position: Position) -> bool:
        return self.parse(document).is_in_string(position)

    def is_in_comment(self, document: AssetDocument, position: Position) -> bool:
        return self.parse(document).is_in_comment(position)

    def is_non_code(self, document: AssetDocument, position: Position) -> bool:
        return self.parse(document).is_non_code(position)

    def resolve_reference(self, document: AssetDocument, keyword: str, raw_id: str | int) -> ResourceRef:
        """Look up a resource id in the table named by ``keyword``.

        Args:
            document: Document whose tables are searched.
            keyword: ``ExtResource`` or ``SubResource``.
            raw_id: Integer id, digits, or a quoted (escaped) string id.

        Returns:
            A ResourceRef; ``resource`` is None when the id is unknown.

        Raises:
            ReferenceKeywordError: If the keyword is not a reference keyword.
        """
        if keyword not in KEYWORDS:
            raise ReferenceKeywordError(keyword)
        resource_id = str(raw_id)
        if len(resource_id) >= 2 and resource_id[0] == resource_id[-1] == '"':
            resource_id = unescape_string(resource_id[1:-1])
        return self.parse(document).refs.lookup(keyword, resource_id)

    def resolve_call(self, document: AssetDocument, code: str) -> ResourceRef | None:
        """Resolve ``ExtResource(...)``/``SubResource(...)`` code.

        Returns None when ``code`` is not a reference call.
        """
        return self.parse(document).refs.resolve_call(code)

    def resource_tables(
        self, document: AssetDocument
    ) -> tuple[dict[str, ResourceDescriptor], dict[str, ResourceDescriptor]]:
        """External and local resource tables, keyed by id."""
        state = self.parse(document)
        return state.ext_resources, state.sub_resources

    def definition_of(self, document: AssetDocument, code: str) -> Symbol | None:
        """Section symbol that declares the resource a call refers to."""
        ref = self.resolve_call(document, code)
        if ref is None or ref.resource is None:
            return None
        return ref.resource.symbol

    def references_to(self, document: AssetDocument, path: str) -> list[ResourceRef]:
        """Every registered id whose resource has ``path``."""
        return self.parse(document).refs.find_path(path)

    def symbols_at(self, document: AssetDocument, position: Position) -> list[Symbol]:
        """Chain of symbols enclosing ``position``, outermost first."""
        chain: list[Symbol] = []
        symbols = self.symbol_tree(document)
        while True:
            enclosing = next(
                (symbol for symbol in symbols if symbol.range.contains(position, inclusive=True)),
                None,
            )
            if enclosing is None:
                return chain
            chain.append(enclosing)
            symbols = enclosing.children

    def path_at(self, document: AssetDocument, position: Position) -> str | None:
        """File path in the quoted word under ``position``.

        The word counts as a path when it is a resource URL, or when it is
        the ``path`` of an ``ext_resource`` header.

        Returns:
            The path, or None when there is no path at ``position``.
        """
        if self.is_in_comment(document, position):
            return None
        line = document.line_at(position.line)
        for match in QUOTED_PATTERN.finditer(line):
            if match.start(1) <= position.column <= match.end(1):
                word = match.group(1)
                return word if is_path_word(word, line, match.start(1)) else None
        return None

    def colors(self, document: AssetDocument) -> list[ColorValue]:
        """Colors written in code, in source order.

        A ``Color(...)`` constructor gives one color spanning the whole call.
        ``PackedColorArray(...)`` gives one color per group of four numbers,
        spanning that group. Constructors inside strings and comments are
        skipped.
        """
        state = self.parse(document)
        text, position_at = _document_text(document)
        colors: list[ColorValue] = []
        for match in COLOR_PATTERN.finditer(text):
            span = Span(position_at(match.start()), position_at(match.end()))
            if state.is_non_code(span.start):
                continue
            prefix, args = match.groups()
            if prefix.startswith("Color"):
                colors.append(ColorValue(span, *color_components(args)))
                continue
            offset = match.start(2)
            for item in ITEM_PATTERNS[4].finditer(args):
                item_span = Span(position_at(offset + item.start()), position_at(offset + item.end()))
                colors.append(ColorValue(item_span, *color_components(item.group(0))))
        return colors

    def array_items(self, document: AssetDocument) -> list[Span]:
        """Spans of the vectors and colors inside packed array constructors.

        ``PackedVector2Array(1, 2, 3, 4)`` holds two items, ``1, 2`` and
        ``3, 4``; color arrays group numbers by four.
        """
        state = self.parse(document)
        text, position_at = _document_text(document)
        items: list[Span] = []
        for match in ARRAY_PATTERN.finditer(text):
            if state.is_non_code(position_at(match.start())):
                continue
            size = int(match.group(2) or 4)
            offset = match.start(4)
            for item in ITEM_PATTERNS[size].finditer(match.group(4)):
                items.append(Span(position_at(offset + item.start()), position_at(offset + item.end())))
        return items
