"""Name resolution for anonymous functions and classes.

Works on anything shaped like a syntax node with a parent link, so it does
not depend on tree-sitter specifics beyond node type names.
"""
from typing import Optional, Protocol

from chunkers.base import ANONYMOUS

# Expression wrappers between a function/class and the binding that names it
TRANSPARENT_WRAPPERS = frozenset({
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "type_assertion",
    "non_null_expression",
})

# Binding node type -> field holding the bound name
BINDING_NAME_FIELDS = {
    "variable_declarator": "name",
    "pair": "key",
}

# Name node types that are plain identifiers (destructuring patterns are not)
_IDENTIFIER_TYPES = frozenset({
    "identifier",
    "property_identifier",
    "private_property_identifier",
    "string",
    "number",
})


class NamedNode(Protocol):
    type: str
    text: Optional[bytes]

    @property
    def parent(self) -> Optional["NamedNode"]: ...

    def child_by_field_name(self, name: str, /) -> Optional["NamedNode"]: ...


def _identifier_text(node: NamedNode | None) -> str | None:
    if node is None or node.type not in _IDENTIFIER_TYPES or not node.text:
        return None
    text = node.text.decode("utf8", errors="replace")
    if node.type == "string":
        text = text[1:-1]
    return text or None


def declared_name(node: NamedNode) -> str | None:
    """Name from the node's own ``name`` field, if it has one."""
    name_node = node.child_by_field_name("name")
    if name_node is None or not name_node.text:
        return None
    return name_node.text.decode("utf8", errors="replace")


def resolve_bound_name(node: NamedNode) -> str | None:
    """Name an anonymous node receives from its nearest enclosing binding.

    Walks up through transparent wrappers; the first other ancestor must be
    a variable declarator or an object-literal property.
    """
    current = node.parent
    while current is not None and current.type in TRANSPARENT_WRAPPERS:
        current = current.parent

    if current is None or current.type not in BINDING_NAME_FIELDS:
        return None
    return _identifier_text(current.child_by_field_name(BINDING_NAME_FIELDS[current.type]))


def resolve_name(node: NamedNode) -> str:
    """Declared name, else bound name, else the anonymous sentinel."""
    return declared_name(node) or resolve_bound_name(node) or ANONYMOUS
