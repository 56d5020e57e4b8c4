"""Node paths and ExtResource/SubResource reference resolution."""

import re

from gdasset.escapes import unescape_string
from gdasset.exceptions import ReferenceKeywordError
from gdasset.models import ResourceDescriptor, ResourceRef

EXT_RESOURCE = "ExtResource"
SUB_RESOURCE = "SubResource"
KEYWORDS = (EXT_RESOURCE, SUB_RESOURCE)

# Pattern for a whole reference call: ExtResource(1) or SubResource("id")
RESOURCE_CALL_PATTERN = re.compile(
    r'^((?:Ext|Sub)Resource)\s*\(\s*(?:(\d+)|"([^"\\]*)")\s*\)$'
)

# Node paths that can be written without quotes after $ or %
NODE_CODE_PATTERN = re.compile(r"^/?(?:[A-Za-z_]\w*/)*[A-Za-z_]\w*$", re.ASCII)


def node_code(path: str, percent: bool = False) -> str:
    """Render a node path as GDScript ``$path`` (or ``%name``) code.

    Paths that are not plain identifier segments are quoted.
    """
    prefix = "%" if percent else "$"
    if NODE_CODE_PATTERN.match(path):
        return prefix + path
    return f'{prefix}"{path}"'


def parse_resource_call(code: str) -> tuple[str, str] | None:
    """Split ``ExtResource(...)``/``SubResource(...)`` into keyword and id.

    String ids are decoded; integer ids keep their digits.
    """
    match = RESOURCE_CALL_PATTERN.match(code)
    if match is None:
        return None
    keyword, number, text = match.groups()
    return keyword, number if number is not None else unescape_string(text)


class ReferenceResolver:
    """Resource tables and root node of a single document.

    External and local (sub) resources live in independent tables, so the
    same id may appear in both.

    Attributes:
        root_node: Name of the scene's root node, once seen.
        ext_resources: Descriptors from ``ext_resource`` headers by id.
        sub_resources: Descriptors from ``sub_resource`` headers by id.
    """

    def __init__(self) -> None:
        self.root_node: str | None = None
        self.ext_resources: dict[str, ResourceDescriptor] = {}
        self.sub_resources: dict[str, ResourceDescriptor] = {}

    def table(self, keyword: str) -> dict[str, ResourceDescriptor]:
        """Return the table a call keyword refers to.

        Raises:
            ReferenceKeywordError: If the keyword is neither ExtResource nor
                SubResource.
        """
        if keyword == EXT_RESOURCE:
            return self.ext_resources
        if keyword == SUB_RESOURCE:
            return self.sub_resources
        raise ReferenceKeywordError(keyword)

    def register(self, keyword: str, resource_id: str, resource: ResourceDescriptor) -> None:
        self.table(keyword)[resource_id] = resource

    def lookup(self, keyword: str, resource_id: str) -> ResourceRef:
        return ResourceRef(keyword, resource_id, self.table(keyword).get(resource_id))

    def resolve_call(self, code: str) -> ResourceRef | None:
        """Resolve reference call code such as ``ExtResource("1_abc")``.

        Returns:
            None when ``code`` is not a reference call. Otherwise a
            ResourceRef, unresolved when the id is unknown.
        """
        call = parse_resource_call(code)
        if call is None:
            return None
        return self.lookup(*call)

    def find_path(self, path: str) -> list[ResourceRef]:
        """List the references of both tables whose descriptor has ``path``."""
        refs: list[ResourceRef] = []
        for keyword in KEYWORDS:
            for resource_id, resource in self.table(keyword).items():
                if resource.path == path:
                    refs.append(ResourceRef(keyword, resource_id, resource))
        return refs

    def node_path(self, path: str) -> str:
        """Render a scene node path relative to the root node.

        ``.`` is the root node itself, ``./x`` is relative to it. Paths are
        returned unchanged until the root node is known.
        """
        if not self.root_node or not path:
            return path
        if path == ".":
            return node_code("/root/" + self.root_node)
        if path.startswith("./"):
            return node_code(path[2:])
        return node_code(path)
