"""Page-object extraction: locators, helper properties and grouped methods.

For every top-level class in an object file:

- locator properties become one ``locator`` chunk each, positioned where the
  constructor wires them up when it does
- other constructor assignments and initialized properties become ``helper``
  chunks
- all methods are merged into a single ``<Class>_actions`` chunk whose kind
  comes from the keyword rules
"""
import logging
from dataclasses import dataclass, field
from tree_sitter import Node
from analyzers.base import ParsedSource
from analyzers.extractors.base import BaseExtractor, CLASS_DECLARATION_TYPES, top_level_declarations, walk
from analyzers.extractors.paths import extract_module, extract_repository
from analyzers.extractors.rules import classify_members
from analyzers.imports import EMPTY_GRAPH, RelationshipGraph
from analyzers.names import resolve_name
from analyzers.spans import doc_comment, node_location, span_location
from chunkers.base import Chunk, ChunkKind, Location

logger = logging.getLogger(__name__)

LOCATOR_TYPE_MARKER = "Locator"
LOCATOR_CONSTRUCTORS = ("page.locator", "page.getBy")
PROPERTY_TYPES = frozenset({"public_field_definition", "field_definition"})
ACCESSOR_KEYWORDS = frozenset({"get", "set"})


def is_locator_expression(text: str) -> bool:
    return any(marker in text for marker in LOCATOR_CONSTRUCTORS)


@dataclass
class ClassMembers:
    """Members of one class body, in source order."""
    node: Node
    name: str
    properties: list[Node] = field(default_factory=list)
    methods: list[Node] = field(default_factory=list)
    constructor: Node | None = None


@dataclass(frozen=True)
class ClassContext:
    """Metadata shared by every chunk extracted from one class."""
    class_name: str
    repository: str
    module: str
    related_test_files: tuple[str, ...]


@dataclass(frozen=True)
class ConstructorAssignment:
    """A ``this.<name> = <value>`` assignment and the statement holding it."""
    name: str
    value: str
    statement: Node


def constructor_assignments(source: ParsedSource, constructor: Node | None) -> list[ConstructorAssignment]:
    """Every ``this.<name> = <expr>`` in the constructor body, in source order."""
    body = constructor.child_by_field_name("body") if constructor is not None else None
    if body is None:
        return []

    assignments = []
    for node in walk(body):
        if node.type != "assignment_expression":
            continue
        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")
        if left is None or right is None or left.type != "member_expression":
            continue
        target = left.child_by_field_name("object")
        prop = left.child_by_field_name("property")
        if target is None or target.type != "this" or prop is None:
            continue

        statement = node.parent if node.parent is not None and node.parent.type == "expression_statement" else node
        assignments.append(ConstructorAssignment(
            name=source.text(prop),
            value=source.text(right),
            statement=statement,
        ))
    return assignments


def top_level_classes(root: Node) -> list[Node]:
    return [node for node in top_level_declarations(root) if node.type in CLASS_DECLARATION_TYPES]


def declares_classes(root: Node) -> bool:
    return bool(top_level_classes(root))


def property_name(source: ParsedSource, prop: Node) -> str:
    name_node = prop.child_by_field_name("name") or prop.child_by_field_name("property")
    return source.text(name_node)


def collect_members(source: ParsedSource, class_node: Node) -> ClassMembers:
    members = ClassMembers(node=class_node, name=resolve_name(class_node))
    body = class_node.child_by_field_name("body")
    if body is None:
        return members

    for child in body.named_children:
        if child.type in PROPERTY_TYPES:
            members.properties.append(child)
        elif child.type == "method_definition":
            if source.text(child.child_by_field_name("name")) == "constructor":
                if members.constructor is None:
                    members.constructor = child
            elif not any(not c.is_named and c.type in ACCESSOR_KEYWORDS for c in child.children):
                members.methods.append(child)
    return members


class PageObjectExtractor(BaseExtractor):
    """Extract locator, helper and action/assert chunks from page-object classes."""

    def extract(
        self,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        classes = top_level_classes(source.root)
        if not classes:
            return []

        graph = graph or EMPTY_GRAPH
        repository = extract_repository(source.file_path)
        module = extract_module(source.file_path)

        chunks = []
        for class_node in classes:
            members = collect_members(source, class_node)
            context = ClassContext(
                class_name=members.name,
                repository=repository,
                module=module,
                related_test_files=graph.tests_for_class(members.name),
            )

            locators = self._extract_locators(source, members, context, include_code)
            claimed = {chunk.name for chunk in locators}
            class_chunks = [
                *locators,
                *self._extract_simple_properties(source, members, context, claimed, include_code),
            ]
            actions = self._extract_actions(source, members, context, include_code)
            if actions is not None:
                class_chunks.append(actions)

            if not class_chunks and members.constructor is not None:
                class_chunks.append(self._member_chunk(
                    f"{members.name}_class",
                    ChunkKind.CLASS,
                    node_location(source, members.constructor),
                    context,
                    member_names=None,
                    code=self._code(source, members.constructor, include_code),
                    documentation=doc_comment(class_node),
                ))

            logger.debug(f"Class {members.name} in {source.file_path}: {len(class_chunks)} chunks")
            chunks.extend(class_chunks)

        return chunks

    def _member_chunk(
        self,
        name: str,
        kind: ChunkKind,
        location: Location,
        context: ClassContext,
        member_names: str | None,
        code: str | None = None,
        documentation: str | None = None,
    ) -> Chunk:
        return Chunk(
            name=name,
            kind=kind,
            location=location,
            code=code,
            documentation=documentation,
            owning_class=context.class_name,
            member_names=member_names,
            repository=context.repository,
            module=context.module,
            related_test_files=context.related_test_files,
        )


    def _extract_locators(
        self,
        source: ParsedSource,
        members: ClassMembers,
        context: ClassContext,
        include_code: bool,
    ) -> list[Chunk]:
        chunks = []
        claimed = set()
        assignments = constructor_assignments(source, members.constructor)
        first_assignment: dict[str, ConstructorAssignment] = {}
        for assignment in assignments:
            first_assignment.setdefault(assignment.name, assignment)

        for prop in members.properties:
            name = property_name(source, prop)
            type_text = source.text(prop.child_by_field_name("type"))
            initializer = source.text(prop.child_by_field_name("value"))
            if LOCATOR_TYPE_MARKER not in type_text and not is_locator_expression(initializer):
                continue

            # Where the constructor wires the locator up takes precedence over the declaration
            assignment = first_assignment.get(name)
            if assignment is not None:
                location = node_location(source, assignment.statement)
                code = f"{source.text(prop)}\n\n// Initialization:\n{source.text(assignment.statement)}"
            elif is_locator_expression(initializer):
                location = node_location(source, prop)
                code = source.text(prop)
            else:
                continue

            claimed.add(name)
            chunks.append(self._member_chunk(
                name,
                ChunkKind.LOCATOR,
                location,
                context,
                member_names=name,
                code=code if include_code else None,
                documentation=doc_comment(prop),
            ))

        # Locators assigned in the constructor without a property declaration
        for assignment in assignments:
            if assignment.name in claimed or not is_locator_expression(assignment.value):
                continue
            claimed.add(assignment.name)
            chunks.append(self._member_chunk(
                assignment.name,
                ChunkKind.LOCATOR,
                node_location(source, assignment.statement),
                context,
                member_names=assignment.name,
                code=source.text(assignment.statement) if include_code else None,
            ))

        return chunks

    def _extract_simple_properties(
        self,
        source: ParsedSource,
        members: ClassMembers,
        context: ClassContext,
        claimed: set[str],
        include_code: bool,
    ) -> list[Chunk]:
        chunks = []
        processed = set(claimed)
        declared = {property_name(source, prop): prop for prop in members.properties}

        for assignment in constructor_assignments(source, members.constructor):
            if is_locator_expression(assignment.value) or assignment.name in processed:
                continue
            processed.add(assignment.name)

            prop = declared.get(assignment.name)
            declaration = source.text(prop) if prop is not None else f"{assignment.name}: any;"
            chunks.append(self._member_chunk(
                assignment.name,
                ChunkKind.HELPER,
                node_location(source, assignment.statement),
                context,
                member_names=assignment.name,
                code=f"{declaration}\n\n// Initialization:\n{source.text(assignment.statement)}" if include_code else None,
                documentation=doc_comment(prop) if prop is not None else None,
            ))

        for prop in members.properties:
            name = property_name(source, prop)
            if name in processed:
                continue
            if LOCATOR_TYPE_MARKER in source.text(prop.child_by_field_name("type")):
                continue

            initializer = prop.child_by_field_name("value")
            if initializer is None or is_locator_expression(source.text(initializer)):
                continue

            processed.add(name)
            chunks.append(self._member_chunk(
                name,
                ChunkKind.HELPER,
                node_location(source, prop),
                context,
                member_names=name,
                code=self._code(source, prop, include_code),
                documentation=doc_comment(prop),
            ))

        return chunks

    def _extract_actions(
        self,
        source: ParsedSource,
        members: ClassMembers,
        context: ClassContext,
        include_code: bool,
    ) -> Chunk | None:
        """Merge all methods into one chunk spanning the first to the last."""
        if not members.methods:
            return None

        method_names = [source.text(m.child_by_field_name("name")) for m in members.methods]
        body = "\n\n".join(source.text(m) for m in members.methods)
        kind = classify_members(method_names, body)

        return self._member_chunk(
            f"{members.name}_actions",
            kind,
            span_location(source, members.methods[0], members.methods[-1]),
            context,
            member_names=", ".join(method_names),
            code=body if include_code else None,
        )
