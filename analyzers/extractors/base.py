"""Base extractor interface and tree-walking helpers."""
from abc import ABC, abstractmethod
from collections.abc import Iterator
from tree_sitter import Node
from analyzers.base import ParsedSource
from analyzers.imports import RelationshipGraph
from chunkers.base import Chunk

CALL_EXPRESSION = "call_expression"
CLASS_DECLARATION_TYPES = frozenset({"class_declaration", "abstract_class_declaration", "class"})


def walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal of a subtree, the node itself included."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def descendants_of_type(node: Node, node_type: str) -> list[Node]:
    """All strict descendants of a given type, in document order."""
    nodes = walk(node)
    next(nodes)
    return [n for n in nodes if n.type == node_type]


def ancestors(node: Node) -> Iterator[Node]:
    current = node.parent
    while current is not None:
        yield current
        current = current.parent


def call_arguments(call: Node) -> list[Node]:
    """Argument expressions of a call, comments excluded."""
    args = call.child_by_field_name("arguments")
    if args is None:
        return []
    return [child for child in args.named_children if child.type != "comment"]


def top_level_declarations(root: Node) -> Iterator[Node]:
    """Statements of the program, with ``export`` wrappers unwrapped."""
    for child in root.named_children:
        if child.type == "comment":
            continue
        if child.type == "export_statement":
            inner = child.child_by_field_name("declaration") or child.child_by_field_name("value")
            if inner is not None:
                yield inner
            continue
        yield child


class BaseExtractor(ABC):
    """Base class for chunk extractors."""

    @abstractmethod
    def extract(
        self,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        """Extract chunks from one parsed file.

        Args:
            source: Parsed file with its syntax tree
            include_code: Whether to copy source text into chunks
            graph: Relationship graph from the import pre-pass, if any

        Returns:
            Chunks in source order; empty if nothing matched
        """
        pass

    def _get_text(self, source: ParsedSource, node: Node | None) -> str:
        return source.text(node)

    def _callee_text(self, source: ParsedSource, call: Node) -> str:
        return source.text(call.child_by_field_name("function"))

    def _code(self, source: ParsedSource, node: Node, include_code: bool) -> str | None:
        return source.text(node) if include_code else None
