"""Data models for parsed Godot asset documents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gdasset.references import ReferenceResolver


@dataclass(frozen=True, order=True)
class Position:
    """A 0-based (line, column) location in a document.

    Positions order lexicographically, line first.
    """

    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """A half-open range of positions.

    Attributes:
        start: First position covered by the span.
        end: First position past the span.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Span end {self.end} precedes start {self.start}")

    @classmethod
    def of(cls, start_line: int, start_col: int, end_line: int, end_col: int) -> Span:
        return cls(Position(start_line, start_col), Position(end_line, end_col))

    def contains(self, position: Position, *, inclusive: bool = False) -> bool:
        """Check whether ``position`` lies inside the span.

        Args:
            position: Position to test.
            inclusive: Also accept the end position itself.
        """
        if inclusive:
            return self.start <= position <= self.end
        return self.start <= position < self.end

    def extend_to(self, end: Position) -> Span:
        return Span(self.start, max(self.end, end))


@dataclass(frozen=True)
class StringToken:
    """A quoted string literal and its decoded value.

    The span starts at the opening quote and ends just past the closing one.
    """

    span: Span
    value: str

    @property
    def closing_quote(self) -> Position:
        return Position(self.span.end.line, self.span.end.column - 1)


@dataclass(frozen=True)
class CommentToken:
    """A ``;`` or ``#`` comment, marker included."""

    span: Span
    value: str


class AttributeKind(str, Enum):
    NUMBER = "number"
    STRING = "string"
    REFERENCE = "reference"


@dataclass(frozen=True)
class Attribute:
    """A ``key=value`` pair from a section header.

    Attributes:
        key: Attribute name.
        value: Digits for numbers, the decoded text for strings, or the raw
            ``ExtResource(...)`` / ``SubResource(...)`` call for references.
        kind: Which of the three value shapes was found.
    """

    key: str
    value: str
    kind: AttributeKind


class SymbolKind(str, Enum):
    NAMESPACE = "namespace"
    FILE = "file"
    PROPERTY = "property"
    ARRAY = "array"
    OBJECT = "object"
    EVENT = "event"
    BOOLEAN = "boolean"
    VARIABLE = "variable"


@dataclass
class Symbol:
    """A named, range-addressed construct of an asset document.

    Symbols stay mutable while the scanner runs, since section and property
    ranges grow as their trailing content is read.

    Attributes:
        name: Display name (tag, property key, node path expression...).
        detail: Free-form description, usually the declared type.
        kind: Symbol kind.
        range: Whole construct, header or key to end of content.
        selection_range: Header or key token only.
        children: Nested symbols in source order.
        attributes: Header attributes, for section symbols.
    """

    name: str
    detail: str
    kind: SymbolKind
    range: Span
    selection_range: Span
    children: list[Symbol] = field(default_factory=list)
    attributes: dict[str, Attribute] = field(default_factory=dict)

    def walk(self) -> Iterator[Symbol]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class ResourceDescriptor:
    """A resource known to a document.

    Attributes:
        path: Resource path (``res://``, ``user://``, ``uid://`` or a
            ``<file>::<id>`` sub-resource path).
        type: Declared type name, empty when undeclared.
        symbol: Section symbol that declares the resource.
    """

    path: str
    type: str
    symbol: Symbol | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ResourceRef:
    """Result of resolving an ``ExtResource``/``SubResource`` reference.

    ``resource`` is None when the id is not registered in the document.
    """

    keyword: str
    id: str
    resource: ResourceDescriptor | None = None

    @property
    def resolved(self) -> bool:
        return self.resource is not None


@dataclass(frozen=True)
class ColorValue:
    """A color written in code, with channels in the 0..1 range."""

    span: Span
    red: float
    green: float
    blue: float
    alpha: float

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return self.red, self.green, self.blue, self.alpha


@dataclass
class DocumentState:
    """Everything known about one parsed document.

    Attributes:
        uri: Identity of the document.
        version: Version token the state was computed for.
        refs: Reference tables and root node of the scene.
        resource: Resource described by the document itself, if any.
        strings: String literals in source order.
        comments: Comments in source order.
        symbols: Top-level symbols in source order.
    """

    uri: str
    version: int | str
    refs: ReferenceResolver
    resource: ResourceDescriptor | None = None
    strings: list[StringToken] = field(default_factory=list)
    comments: list[CommentToken] = field(default_factory=list)
    symbols: list[Symbol] = field(default_factory=list)

    @property
    def root_node(self) -> str | None:
        return self.refs.root_node

    @property
    def ext_resources(self) -> dict[str, ResourceDescriptor]:
        return self.refs.ext_resources

    @property
    def sub_resources(self) -> dict[str, ResourceDescriptor]:
        return self.refs.sub_resources

    def is_in_string(self, position: Position) -> bool:
        return any(token.span.contains(position) for token in self.strings)

    def is_in_comment(self, position: Position) -> bool:
        return any(token.span.contains(position) for token in self.comments)

    def is_non_code(self, position: Position) -> bool:
        return self.is_in_string(position) or self.is_in_comment(position)
