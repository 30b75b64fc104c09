"""Test-case extraction for Playwright/Jest style spec files.

Two scans run over the call expressions of a file:

1. grouped: test calls whose nearest grouping ancestor is a ``describe``
   block, reported with that block's suite name
2. standalone: test calls with no grouping ancestor at all

A test call is therefore emitted exactly once, and only under its innermost
suite.
"""
import logging
import re
from tree_sitter import Node
from analyzers.base import ParsedSource
from analyzers.extractors.base import (
    BaseExtractor,
    CALL_EXPRESSION,
    ancestors,
    call_arguments,
    descendants_of_type,
)
from analyzers.extractors.paths import extract_module, extract_repository
from analyzers.imports import RelationshipGraph
from analyzers.spans import doc_comment, has_doc_comment, node_location, plain_comment_text, strip_quotes
from chunkers.base import Chunk, ChunkKind

logger = logging.getLogger(__name__)

TEST_CALLEES = frozenset({"test", "it"})
FOCUSED_TEST_PREFIXES = ("test.only", "it.only")
LIFECYCLE_HOOK = re.compile(r"^(before|after)", re.IGNORECASE)


def is_grouping_callee(callee: str) -> bool:
    return callee == "describe" or "test.describe" in callee


def is_test_callee(callee: str) -> bool:
    return callee in TEST_CALLEES or callee.startswith(FOCUSED_TEST_PREFIXES)


class TestCaseExtractor(BaseExtractor):
    """Extract ``test``/``it`` calls from spec and setup files."""

    def extract(
        self,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        repository = extract_repository(source.file_path)
        module = extract_module(source.file_path)
        calls = descendants_of_type(source.root, CALL_EXPRESSION)

        groups = [call for call in calls if self._is_group(source, call)]
        test_calls = [call for call in calls if is_test_callee(self._callee_text(source, call))]

        chunks = []

        # Pass 1: tests inside describe blocks, under their innermost suite
        for group in groups:
            suite_name = strip_quotes(self._get_text(source, call_arguments(group)[0]))
            callback = self._group_callback(group)
            for test_call in test_calls:
                if not self._is_within(test_call, callback):
                    continue
                if self._nearest_group(source, test_call) != group:
                    continue
                chunk = self._test_chunk(source, test_call, suite_name, repository, module, include_code)
                if chunk is not None:
                    chunks.append(chunk)

        # Pass 2: tests outside any describe block
        for test_call in test_calls:
            if self._nearest_group(source, test_call) is not None:
                continue
            chunk = self._test_chunk(source, test_call, None, repository, module, include_code)
            if chunk is not None:
                chunks.append(chunk)

        logger.debug(f"Found {len(groups)} suites and {len(chunks)} tests in {source.file_path}")
        return chunks

    def _is_group(self, source: ParsedSource, call: Node) -> bool:
        return is_grouping_callee(self._callee_text(source, call)) and len(call_arguments(call)) >= 2

    def _group_callback(self, group: Node) -> Node:
        """Last argument, tolerating an options object before the callback."""
        args = call_arguments(group)
        if len(args) >= 3 and args[1].type == "object":
            return args[2]
        return args[1]

    def _nearest_group(self, source: ParsedSource, node: Node) -> Node | None:
        """Innermost describe call whose callback contains the node."""
        for ancestor in ancestors(node):
            if ancestor.type != CALL_EXPRESSION or not self._is_group(source, ancestor):
                continue
            if self._is_within(node, self._group_callback(ancestor)):
                return ancestor
        return None

    def _is_within(self, node: Node, container: Node) -> bool:
        return container.start_byte <= node.start_byte and node.end_byte <= container.end_byte

    def _test_chunk(
        self,
        source: ParsedSource,
        call: Node,
        suite_name: str | None,
        repository: str,
        module: str,
        include_code: bool,
    ) -> Chunk | None:
        args = call_arguments(call)
        if len(args) < 2:
            return None

        test_name = strip_quotes(self._get_text(source, args[0]))
        if LIFECYCLE_HOOK.match(test_name):
            return None

        # A JSDoc block takes precedence even when only tags remain after stripping
        if has_doc_comment(call):
            documentation = doc_comment(call) or test_name
        else:
            documentation = plain_comment_text(call) or test_name

        return Chunk(
            name=test_name,
            kind=ChunkKind.TEST,
            location=node_location(source, call),
            code=self._code(source, call, include_code),
            documentation=documentation,
            repository=repository,
            module=module,
            test_suite_name=suite_name,
            test_case_name=test_name,
        )
