import textwrap
from collections.abc import Callable

import pytest

from analyzers.base import ParsedSource
from analyzers.tree_sitter import TreeSitterAnalyzer


@pytest.fixture(scope="session")
def analyzer() -> TreeSitterAnalyzer:
    return TreeSitterAnalyzer()


@pytest.fixture
def parse(analyzer: TreeSitterAnalyzer) -> Callable[..., ParsedSource]:
    def _parse(code: str, path: str = "src/example.ts") -> ParsedSource:
        source = analyzer.parse_source(path, textwrap.dedent(code).lstrip("\n"), path)
        assert source is not None
        return source

    return _parse
