"""Import relationship analysis between page objects and the tests using them.

Runs once over the test files before any file is classified. The result is a
read-only graph that the Playwright extractor consults for
``related_test_files``.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from tree_sitter import Node

from analyzers.base import to_relative_path
from analyzers.spans import strip_quotes
from analyzers.tree_sitter import TreeSitterAnalyzer

logger = logging.getLogger(__name__)

# Module specifiers containing this are treated as page-object imports
PAGE_OBJECT_MARKER = "page-object"


@dataclass(frozen=True)
class RelationshipGraph:
    """Bidirectional class <-> test-file mapping; read-only once built."""
    class_to_tests: Mapping[str, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))
    test_to_classes: Mapping[str, frozenset[str]] = field(default_factory=lambda: MappingProxyType({}))

    def tests_for_class(self, class_name: str) -> tuple[str, ...]:
        return tuple(sorted(self.class_to_tests.get(class_name, ())))

    def classes_for_test(self, test_file: str) -> tuple[str, ...]:
        return tuple(sorted(self.test_to_classes.get(test_file, ())))

    def __len__(self) -> int:
        return sum(len(tests) for tests in self.class_to_tests.values())


EMPTY_GRAPH = RelationshipGraph()


class RelationshipGraphBuilder:
    """Accumulates edges; every edge is written in both directions."""

    def __init__(self):
        self._class_to_tests: dict[str, set[str]] = {}
        self._test_to_classes: dict[str, set[str]] = {}

    def add(self, class_name: str, test_file: str) -> None:
        self._class_to_tests.setdefault(class_name, set()).add(test_file)
        self._test_to_classes.setdefault(test_file, set()).add(class_name)

    def build(self) -> RelationshipGraph:
        return RelationshipGraph(
            class_to_tests=MappingProxyType({k: frozenset(v) for k, v in self._class_to_tests.items()}),
            test_to_classes=MappingProxyType({k: frozenset(v) for k, v in self._test_to_classes.items()}),
        )


def imported_page_objects(root: Node) -> list[str]:
    """Names imported by ``import { A, B } from '...page-objects...'`` statements.

    Aliased specifiers contribute the exported name, not the local alias.
    """
    names: list[str] = []
    for statement in root.named_children:
        if statement.type != "import_statement":
            continue

        source_node = statement.child_by_field_name("source")
        if source_node is None or not source_node.text:
            continue
        module = strip_quotes(source_node.text.decode("utf8", errors="replace"))
        if PAGE_OBJECT_MARKER not in module:
            continue

        for clause in statement.named_children:
            if clause.type != "import_clause":
                continue
            for named_imports in clause.named_children:
                if named_imports.type != "named_imports":
                    continue
                for specifier in named_imports.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    name_node = specifier.child_by_field_name("name")
                    if name_node is not None and name_node.text:
                        names.append(name_node.text.decode("utf8", errors="replace"))
    return names


class ImportRelationshipAnalyzer:
    """Builds the relationship graph from the imports of test files."""

    def __init__(self, analyzer: TreeSitterAnalyzer):
        self._analyzer = analyzer

    def analyze(self, test_files: list[str], project_root: str | Path) -> RelationshipGraph:
        """Scan each test file's imports and build the relationship graph.

        Args:
            test_files: Paths of test files to inspect
            project_root: Root used to relativize test file paths

        Returns:
            Immutable relationship graph
        """
        logger.info(f"Analyzing imports in {len(test_files)} test files...")
        builder = RelationshipGraphBuilder()

        for test_file in test_files:
            try:
                source = self._analyzer.load(test_file, project_root)
                for class_name in imported_page_objects(source.root):
                    builder.add(class_name, source.file_path)
            except Exception as e:
                logger.error(f"Error analyzing imports in {to_relative_path(test_file, project_root)}: {e}")

        graph = builder.build()
        logger.info(f"Found {len(graph.class_to_tests)} page objects with test relationships")
        return graph
