"""Tree-sitter based source tree provider for JavaScript and TypeScript.

Uses tree-sitter-language-pack for the javascript, typescript and tsx grammars.
Docs: https://tree-sitter.github.io/tree-sitter/using-parsers/
"""
import logging
from pathlib import Path
from tree_sitter import Parser, Node
from tree_sitter_language_pack import get_parser
from analyzers.base import ASTAnalyzer, ParsedSource, to_relative_path

logger = logging.getLogger(__name__)

# Map file extensions to tree-sitter language names
EXTENSION_TO_TREE_SITTER = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def get_language_name(file_path: str) -> str:
    """Get tree-sitter language name from file extension.

    Raises:
        ValueError: If the extension is not a supported JS/TS variant
    """
    ext = Path(file_path).suffix.lower()
    language = EXTENSION_TO_TREE_SITTER.get(ext)
    if not language:
        raise ValueError(f"Unsupported file type: {ext or file_path}")
    return language


class TreeSitterAnalyzer(ASTAnalyzer):
    """JS/TS syntax-tree provider; one parser is cached per language variant."""

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        logger.info("TreeSitterAnalyzer initialized")

    def can_analyze(self, file_path: str) -> bool:
        """Check if we can analyze this file type."""
        ext = Path(file_path).suffix.lower()
        return ext in EXTENSION_TO_TREE_SITTER

    def _get_parser(self, language_name: str) -> Parser:
        """Get or create parser for language."""
        if language_name not in self._parsers:
            logger.debug(f"Loading Tree-sitter parser for {language_name}")
            self._parsers[language_name] = get_parser(language_name)
        return self._parsers[language_name]

    def parse(self, content: bytes, language: str) -> Node | None:
        """Parse content and return AST root node."""
        try:
            parser = self._get_parser(language)
            tree = parser.parse(content)
            return tree.root_node
        except Exception as e:
            logger.warning(f"Failed to parse {language} code: {e}")
            return None

    def parse_source(self, file_path: str, content: str, relative_path: str) -> ParsedSource | None:
        """Parse content into a ParsedSource for the extractors."""
        language = get_language_name(file_path)
        data = bytes(content, "utf8")

        root = self.parse(data, language)
        if root is None:
            return None
        if root.has_error:
            logger.debug(f"Syntax errors in {relative_path}; extracting from the recovered tree")

        return ParsedSource(file_path=relative_path, language=language, content=data, root=root)

    def load(self, file_path: str | Path, project_root: str | Path) -> ParsedSource:
        """Read and parse a file from disk.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file type is unsupported or parsing fails
        """
        path = Path(file_path)
        content = path.read_text(encoding="utf-8")
        relative_path = to_relative_path(path, project_root)

        source = self.parse_source(str(path), content, relative_path)
        if source is None:
            raise ValueError(f"Failed to parse {relative_path}")
        return source
