"""Section header symbols.

A section header such as ``[ext_resource type="Texture2D" path="res://a.png"
id="1"]`` becomes one Symbol. Known tags get a name and detail derived from
their attributes and register resources with the document's
:class:`~gdasset.references.ReferenceResolver`; unknown tags keep a generic
symbol.
"""

import re
from enum import Enum
from urllib.parse import unquote, urlparse

from gdasset.escapes import unescape_string
from gdasset.models import (
    Attribute,
    AttributeKind,
    DocumentState,
    ResourceDescriptor,
    Span,
    Symbol,
    SymbolKind,
)
from gdasset.references import EXT_RESOURCE, SUB_RESOURCE, node_code
from gdasset.values import filename

# key=123, key="text" or key=ExtResource(...)/SubResource(...)
ATTRIBUTE_PATTERN = re.compile(
    r'\b([\w-]+)\b\s*=\s*(?:(\d+)|"([^"\\]*)"|((?:Ext|Sub)Resource\s*\(.*?\)))'
)

# File title and extension of the document's own path
DOCUMENT_NAME_PATTERN = re.compile(r"^(?:.*/)*(.*?)(\.\w*)?$")


class SectionTag(str, Enum):
    """Section tags with dedicated naming rules.

    Any other tag maps to ``OTHER``.
    """

    GD_SCENE = "gd_scene"
    GD_RESOURCE = "gd_resource"
    EXT_RESOURCE = "ext_resource"
    SUB_RESOURCE = "sub_resource"
    NODE = "node"
    CONNECTION = "connection"
    EDITABLE = "editable"
    OTHER = ""

    @classmethod
    def _missing_(cls, value: object) -> "SectionTag":
        return cls.OTHER


def parse_attributes(text: str) -> dict[str, Attribute]:
    """Read the ``key=value`` attributes of a section header."""
    attributes: dict[str, Attribute] = {}
    for match in ATTRIBUTE_PATTERN.finditer(text):
        key, number, string, call = match.groups()
        if number is not None:
            attribute = Attribute(key, number, AttributeKind.NUMBER)
        elif call is not None:
            attribute = Attribute(key, call, AttributeKind.REFERENCE)
        else:
            attribute = Attribute(key, unescape_string(string), AttributeKind.STRING)
        attributes[key] = attribute
    return attributes


def document_path(uri: str) -> str:
    """Path component of a document URI (or the string itself for paths)."""
    parsed = urlparse(uri)
    if parsed.scheme and len(parsed.scheme) > 1:
        return unquote(parsed.path)
    return uri.replace("\\", "/")


def section_symbol(tag: str, rest: str, span: Span, selection: Span, state: DocumentState) -> Symbol:
    """Build the symbol of a section header and register what it declares.

    Args:
        tag: Header tag, e.g. ``node``.
        rest: Raw attribute text after the tag.
        span: Range of the header line.
        selection: Range of the bracketed header itself.
        state: Document being built; its resource tables and root node are
            updated in place.

    Returns:
        The section symbol. Never raises on missing attributes.
    """
    attributes = parse_attributes(rest)
    values = {key: attribute.value for key, attribute in attributes.items()}
    kind = SymbolKind.OBJECT if rest else SymbolKind.NAMESPACE
    symbol = Symbol(tag, rest, kind, span, selection, attributes=attributes)
    refs = state.refs
    resource_id = values.get("id")

    match SectionTag(tag):
        case SectionTag.GD_SCENE:
            name = document_path(state.uri).rsplit("/", 1)[-1]
            title, ext = DOCUMENT_NAME_PATTERN.match(name).groups()
            symbol.name = title
            symbol.detail = "PackedScene"
            symbol.kind = SymbolKind.FILE
            state.resource = ResourceDescriptor(title + (ext or ""), "PackedScene", symbol)

        case SectionTag.GD_RESOURCE:
            name = document_path(state.uri).rsplit("/", 1)[-1]
            type_name = values.get("type", "")
            symbol.name = name
            symbol.detail = type_name
            symbol.kind = SymbolKind.FILE
            state.resource = ResourceDescriptor(name, type_name, symbol)

        case SectionTag.EXT_RESOURCE:
            type_name = values.get("type", "")
            if resource_id:
                descriptor = ResourceDescriptor(values.get("path", "?"), type_name, symbol)
                refs.register(EXT_RESOURCE, resource_id, descriptor)
            symbol.name = values.get("path", tag)
            symbol.detail = type_name
            symbol.kind = SymbolKind.VARIABLE

        case SectionTag.SUB_RESOURCE:
            type_name = values.get("type", "")
            if resource_id:
                sub_path = "::" + resource_id
                own_path = state.resource.path if state.resource else ""
                descriptor = ResourceDescriptor(own_path + sub_path, type_name, symbol)
                refs.register(SUB_RESOURCE, resource_id, descriptor)
                symbol.name = sub_path
            symbol.detail = type_name
            symbol.kind = SymbolKind.OBJECT

        case SectionTag.NODE:
            name = values.get("name")
            if "parent" not in values:
                if name:
                    refs.root_node = name
                    symbol.name = node_code("/root/" + name)
            else:
                symbol.name = refs.node_path(f"{values['parent']}/{name or ''}")
            symbol.detail = _node_detail(values, state)
            symbol.kind = SymbolKind.OBJECT

        case SectionTag.CONNECTION:
            if all(values.get(key) for key in ("signal", "from", "to", "method")):
                source = refs.node_path(values["from"])
                target = refs.node_path(values["to"])
                symbol.name = f"{source}.{values['signal']}.connect({target}.{values['method']})"
                symbol.detail = ""
            symbol.kind = SymbolKind.EVENT

        case SectionTag.EDITABLE:
            symbol.name = f"is_editable_instance({refs.node_path(values.get('path', ''))})"
            symbol.detail = ""
            symbol.kind = SymbolKind.BOOLEAN

        case SectionTag.OTHER:
            pass

    return symbol


def _node_detail(values: dict[str, str], state: DocumentState) -> str:
    if values.get("type"):
        return values["type"]
    if values.get("index"):
        return "@" + values["index"]
    if values.get("instance_placeholder"):
        path = values["instance_placeholder"]
        return f"InstancePlaceholder # {_title(path)}"
    if values.get("instance"):
        ref = state.refs.resolve_call(values["instance"])
        path = ref.resource.path if ref and ref.resource else "?"
        return f"# {_title(path)}"
    return ""


def _title(path: str) -> str:
    parts = filename(path)
    return parts.title if parts and parts.title else path
