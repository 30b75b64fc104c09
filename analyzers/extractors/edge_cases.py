"""Fallback shapes for files without tests or classes.

Collects setup calls, ``test.extend`` fixtures, exported object/array
constants and top-level IIFEs. Each shape is collected independently.
"""
import logging
from tree_sitter import Node
from analyzers.base import ParsedSource
from analyzers.extractors.base import BaseExtractor, CALL_EXPRESSION, call_arguments, descendants_of_type
from analyzers.imports import RelationshipGraph
from analyzers.names import declared_name
from analyzers.spans import node_location, strip_quotes
from chunkers.base import ANONYMOUS, Chunk, ChunkKind

logger = logging.getLogger(__name__)

DEFAULT_SETUP_NAME = "Setup"
EXTEND_CALLEES = ("test.extend", "base.extend")
CONSTANT_INITIALIZERS = frozenset({"object", "array"})
FUNCTION_EXPRESSIONS = frozenset({"function_expression", "function", "arrow_function"})
VARIABLE_STATEMENTS = frozenset({"lexical_declaration", "variable_declaration"})


def is_setup_callee(callee: str) -> bool:
    return callee == "setup" or "test.use" in callee


def is_extend_callee(callee: str) -> bool:
    return any(marker in callee for marker in EXTEND_CALLEES)


class EdgeCaseExtractor(BaseExtractor):
    """Extract setup, fixture, constant and IIFE chunks."""

    def extract(
        self,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        calls = descendants_of_type(source.root, CALL_EXPRESSION)

        chunks = []
        chunks.extend(self._extract_setup_calls(source, calls, include_code))
        chunks.extend(self._extract_fixtures(source, calls, include_code))
        chunks.extend(self._extract_constants(source, include_code))
        chunks.extend(self._extract_iifes(source, calls, include_code))

        logger.debug(f"Edge-case extraction found {len(chunks)} chunks in {source.file_path}")
        return chunks

    def _chunk(self, source: ParsedSource, node: Node, name: str, kind: ChunkKind, include_code: bool) -> Chunk:
        return Chunk(
            name=name,
            kind=kind,
            location=node_location(source, node),
            code=self._code(source, node, include_code),
        )

    def _extract_setup_calls(self, source: ParsedSource, calls: list[Node], include_code: bool) -> list[Chunk]:
        chunks = []
        for call in calls:
            if not is_setup_callee(self._callee_text(source, call)):
                continue
            args = call_arguments(call)
            if not args:
                continue
            name = strip_quotes(self._get_text(source, args[0])) if args[0].type == "string" else DEFAULT_SETUP_NAME
            chunks.append(self._chunk(source, call, name, ChunkKind.SETUP, include_code))
        return chunks

    def _extract_fixtures(self, source: ParsedSource, calls: list[Node], include_code: bool) -> list[Chunk]:
        """One chunk per property of the object passed to ``test.extend``."""
        chunks = []
        for call in calls:
            if not is_extend_callee(self._callee_text(source, call)):
                continue
            args = call_arguments(call)
            if not args or args[0].type != "object":
                continue
            for prop in args[0].named_children:
                if prop.type != "pair":
                    continue
                name = strip_quotes(self._get_text(source, prop.child_by_field_name("key"))) or ANONYMOUS
                chunks.append(self._chunk(source, prop, name, ChunkKind.FIXTURE, include_code))
        return chunks

    def _extract_constants(self, source: ParsedSource, include_code: bool) -> list[Chunk]:
        """Exported top-level variables initialized with an object or array literal."""
        chunks = []
        for statement in source.root.named_children:
            if statement.type != "export_statement":
                continue
            declaration = statement.child_by_field_name("declaration")
            if declaration is None or declaration.type not in VARIABLE_STATEMENTS:
                continue
            for declarator in declaration.named_children:
                if declarator.type != "variable_declarator":
                    continue
                value = declarator.child_by_field_name("value")
                if value is None or value.type not in CONSTANT_INITIALIZERS:
                    continue
                name = declared_name(declarator) or ANONYMOUS
                chunks.append(self._chunk(source, declarator, name, ChunkKind.CONSTANT, include_code))
        return chunks

    def _extract_iifes(self, source: ParsedSource, calls: list[Node], include_code: bool) -> list[Chunk]:
        """Invocations of a parenthesized function that form a statement on their own."""
        chunks = []
        for call in calls:
            callee = call.child_by_field_name("function")
            if callee is None or callee.type != "parenthesized_expression":
                continue
            inner = callee.named_children[0] if callee.named_children else None
            if inner is None or inner.type not in FUNCTION_EXPRESSIONS:
                continue
            if call.parent is None or call.parent.type != "expression_statement":
                continue
            chunks.append(self._chunk(source, call, f"IIFE in {source.file_name}", ChunkKind.IIFE, include_code))
        return chunks
