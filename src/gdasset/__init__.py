"""gdasset - symbol and reference parser for Godot text asset documents."""

from gdasset.document import AssetDocument, TextDocument
from gdasset.escapes import escape_string, unescape_string
from gdasset.exceptions import GDAssetError, LineOutOfRangeError, ReferenceKeywordError
from gdasset.index import DocumentIndex
from gdasset.models import (
    Attribute,
    AttributeKind,
    ColorValue,
    CommentToken,
    DocumentState,
    Position,
    ResourceDescriptor,
    ResourceRef,
    Span,
    StringToken,
    Symbol,
    SymbolKind,
)
from gdasset.queries import AssetQueries
from gdasset.references import ReferenceResolver, node_code, parse_resource_call
from gdasset.scanner import scan

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "scan",
    "DocumentIndex",
    "AssetQueries",
    # Documents
    "AssetDocument",
    "TextDocument",
    # Escapes
    "escape_string",
    "unescape_string",
    # References
    "ReferenceResolver",
    "node_code",
    "parse_resource_call",
    # Models
    "Attribute",
    "AttributeKind",
    "ColorValue",
    "CommentToken",
    "DocumentState",
    "Position",
    "ResourceDescriptor",
    "ResourceRef",
    "Span",
    "StringToken",
    "Symbol",
    "SymbolKind",
    # Exceptions
    "GDAssetError",
    "LineOutOfRangeError",
    "ReferenceKeywordError",
]
