"""Generic profile: functions, classes, methods and name-bound arrow functions."""
import logging
from tree_sitter import Node
from analyzers.base import ParsedSource
from analyzers.extractors.base import BaseExtractor, walk
from analyzers.imports import RelationshipGraph
from analyzers.names import declared_name, resolve_bound_name, resolve_name
from analyzers.spans import doc_comment, node_location
from chunkers.base import ANONYMOUS, Chunk, ChunkKind

logger = logging.getLogger(__name__)

# Node type -> chunk kind
NODE_KINDS = {
    "function_declaration": ChunkKind.FUNCTION,
    "generator_function_declaration": ChunkKind.FUNCTION,
    "function_expression": ChunkKind.FUNCTION,
    "function": ChunkKind.FUNCTION,
    "generator_function": ChunkKind.FUNCTION,
    "arrow_function": ChunkKind.FUNCTION,
    "class_declaration": ChunkKind.CLASS,
    "abstract_class_declaration": ChunkKind.CLASS,
    "class": ChunkKind.CLASS,
    "method_definition": ChunkKind.METHOD,
}


def enclosing_class_name(node: Node) -> str | None:
    """Name of the class whose body directly contains this node."""
    body = node.parent
    if body is None or body.type != "class_body" or body.parent is None:
        return None
    return resolve_name(body.parent)


class GenericExtractor(BaseExtractor):
    """Extract every function, class and method declaration, however deeply nested."""

    def extract(
        self,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        chunks = []
        for node in walk(source.root):
            chunk = self._classify(source, node, include_code)
            if chunk is not None:
                chunks.append(chunk)

        logger.debug(f"Generic extraction found {len(chunks)} chunks in {source.file_path}")
        return chunks

    def _classify(self, source: ParsedSource, node: Node, include_code: bool) -> Chunk | None:
        # Keyword tokens share type names with nodes ("class", "function")
        kind = NODE_KINDS.get(node.type) if node.is_named else None
        if kind is None:
            return None

        owning_class = None
        if node.type == "arrow_function":
            # Only arrow functions bound to a name count as declarations
            name = resolve_bound_name(node)
            if name is None:
                return None
        elif node.type == "method_definition":
            name = self._get_text(source, node.child_by_field_name("name")) or ANONYMOUS
            if name == "constructor":
                kind = ChunkKind.CONSTRUCTOR
            owning_class = enclosing_class_name(node)
        else:
            name = declared_name(node) or resolve_bound_name(node) or ANONYMOUS
            if kind == ChunkKind.CLASS:
                owning_class = name

        return Chunk(
            name=name,
            kind=kind,
            location=node_location(source, node),
            code=self._code(source, node, include_code),
            documentation=doc_comment(node),
            owning_class=owning_class,
        )
