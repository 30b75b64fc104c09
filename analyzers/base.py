"""Base analyzer interface and the parsed-source container handed to extractors."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from tree_sitter import Node


@dataclass(frozen=True)
class ParsedSource:
    """A parsed file: its syntax tree plus the bytes it was parsed from."""
    file_path: str        # Path relative to the project root, POSIX separators
    language: str         # Tree-sitter language variant (javascript, typescript, tsx)
    content: bytes
    root: Node

    @property
    def file_name(self) -> str:
        return PurePosixPath(self.file_path).name

    def text(self, node: Node | None) -> str:
        """Source text of a node, decoded from the original bytes."""
        if node is None:
            return ""
        return self.content[node.start_byte:node.end_byte].decode("utf8", errors="replace")


def to_relative_path(file_path: str | Path, project_root: str | Path) -> str:
    """Express a file path relative to the project root, in POSIX form.

    Paths outside the root are kept as given.
    """
    path = Path(file_path).resolve()
    try:
        return path.relative_to(Path(project_root).resolve()).as_posix()
    except ValueError:
        return Path(file_path).as_posix()


class ASTAnalyzer(ABC):
    """Base class for syntax-tree providers."""

    @abstractmethod
    def can_analyze(self, file_path: str) -> bool:
        """Check if this analyzer can handle the given file.

        Args:
            file_path: Path to the file

        Returns:
            True if this analyzer supports the file type
        """
        pass

    @abstractmethod
    def parse_source(self, file_path: str, content: str, relative_path: str) -> ParsedSource | None:
        """Parse file content into a navigable tree.

        Args:
            file_path: Path used to pick the language variant
            content: File content as string
            relative_path: Project-relative path recorded on chunks

        Returns:
            Parsed source, or None if parsing failed
        """
        pass
