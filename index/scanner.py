"""Directory scanning for JS/TS source files.

Hidden directories and configured ignore names are pruned; ``.gitignore``
rules are applied with pathspec.
Docs: https://github.com/cpburnz/python-pathspec
"""
import logging
import os
from pathlib import Path
import pathspec

logger = logging.getLogger(__name__)


class FileScanner:
    """Collect source files under a directory in a stable, sorted order."""

    def __init__(
        self,
        project_root: str | Path,
        extensions: list[str],
        ignore_patterns: list[str] | None = None,
        respect_gitignore: bool = True,
    ):
        self._root = Path(project_root).resolve()
        self._extensions = {ext.lower() for ext in extensions}
        self._ignored_names = set(ignore_patterns or [])
        self._spec: pathspec.GitIgnoreSpec | None = None
        if respect_gitignore:
            self._load_gitignore()

    def _load_gitignore(self) -> None:
        gitignore_path = self._root / ".gitignore"
        if not gitignore_path.exists():
            logger.debug("No .gitignore found")
            return

        with open(gitignore_path, "r") as f:
            patterns = f.read().splitlines()
        self._spec = pathspec.GitIgnoreSpec.from_lines(patterns)
        logger.info(f"Loaded {len(patterns)} patterns from .gitignore")

    def _is_gitignored(self, path: Path, is_dir: bool = False) -> bool:
        if self._spec is None:
            return False
        try:
            relative = path.relative_to(self._root).as_posix()
        except ValueError:
            return False
        if is_dir:
            relative += "/"
        return self._spec.match_file(relative)

    def _skip_directory(self, path: Path) -> bool:
        name = path.name
        return name.startswith(".") or name in self._ignored_names or self._is_gitignored(path, is_dir=True)

    def scan(self, directory: str | Path | None = None) -> list[Path]:
        """Return matching files under ``directory`` (default: the project root)."""
        scan_root = Path(directory).resolve() if directory else self._root
        if not scan_root.is_dir():
            raise NotADirectoryError(f"Not a directory: {scan_root}")

        files: list[Path] = []
        for current, dirnames, filenames in os.walk(scan_root):
            current_path = Path(current)
            dirnames[:] = sorted(d for d in dirnames if not self._skip_directory(current_path / d))
            for filename in sorted(filenames):
                path = current_path / filename
                if path.suffix.lower() not in self._extensions:
                    continue
                if self._is_gitignored(path):
                    continue
                files.append(path)

        logger.info(f"Found {len(files)} files to process under {scan_root}")
        return files
