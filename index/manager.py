"""Index manager for orchestrating chunk extraction over a directory."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from analyzers.base import to_relative_path
from analyzers.extractors import BaseExtractor, ProjectProfile, get_extractor, is_test_file
from analyzers.imports import EMPTY_GRAPH, ImportRelationshipAnalyzer, RelationshipGraph
from analyzers.tree_sitter import TreeSitterAnalyzer
from chunkers import Chunk, summarize_by_kind
from index.scanner import FileScanner
from settings.config import Settings, normalize_project_type

logger = logging.getLogger(__name__)


@dataclass
class IndexResult:
    """Outcome of one indexing run."""
    chunks: list[Chunk] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    failed_files: list[str] = field(default_factory=list)
    graph: RelationshipGraph = EMPTY_GRAPH

    def summary(self) -> dict:
        return {
            "total": len(self.chunks),
            "by_kind": summarize_by_kind(self.chunks),
            "files": len(self.files),
            "failed_files": list(self.failed_files),
        }


class IndexManager:
    """Orchestrates the two indexing phases.

    Phase 1 builds the relationship graph from test-file imports (Playwright
    profile only). Phase 2 extracts chunks file by file, reading the finished
    graph. The analyzer and its parsers are reused across every file.
    """

    def __init__(self, settings: Settings, analyzer: TreeSitterAnalyzer | None = None):
        self._settings = settings
        self._analyzer = analyzer or TreeSitterAnalyzer()

    def index(
        self,
        path: str | None = None,
        target: str | None = None,
        include_code: bool | None = None,
        project_type: str | None = None,
    ) -> IndexResult:
        """Index a directory and extract semantic chunks.

        Args:
            path: Project root (defaults to settings.project_root)
            target: Optional subdirectory of the root to scan
            include_code: Copy source text into chunks (defaults to settings)
            project_type: "generic" or "playwright" (defaults to settings)

        Returns:
            Chunks in traversal order plus per-run bookkeeping
        """
        project_root = Path(path or self._settings.project_root).resolve()
        target = target if target is not None else self._settings.target
        scan_root = project_root / target if target else project_root
        include_code = self._settings.include_code if include_code is None else include_code
        profile = ProjectProfile(normalize_project_type(project_type or self._settings.project_type))

        logger.info(f"Scanning directory: {scan_root} (profile: {profile.value})")
        scanner = FileScanner(
            project_root,
            extensions=self._settings.file_extensions,
            ignore_patterns=self._settings.ignore_patterns,
            respect_gitignore=self._settings.respect_gitignore,
        )
        files = [f for f in scanner.scan(scan_root) if self._analyzer.can_analyze(str(f))]

        graph = EMPTY_GRAPH
        if profile == ProjectProfile.PLAYWRIGHT:
            logger.info("First pass: analyzing imports in test files...")
            graph = self.build_relationship_graph(files, project_root)

        extractor = get_extractor(profile)
        result = IndexResult(graph=graph)
        for file_path in files:
            relative_path = to_relative_path(file_path, project_root)
            result.files.append(relative_path)

            chunks = self._index_file(file_path, project_root, extractor, include_code, graph)
            if chunks is None:
                result.failed_files.append(relative_path)
                continue
            result.chunks.extend(chunks)

        logger.info(f"Total chunks extracted: {len(result.chunks)} from {len(files)} files")
        return result

    def build_relationship_graph(self, files: list[Path], project_root: Path) -> RelationshipGraph:
        """Build the page-object/test graph from the test files among ``files``."""
        test_files = [str(f) for f in files if is_test_file(str(f))]
        return ImportRelationshipAnalyzer(self._analyzer).analyze(test_files, project_root)

    def _index_file(
        self,
        file_path: Path,
        project_root: Path,
        extractor: BaseExtractor,
        include_code: bool,
        graph: RelationshipGraph,
    ) -> list[Chunk] | None:
        """Extract chunks from one file. Returns None if the file failed."""
        try:
            size = file_path.stat().st_size
            if size > self._settings.max_file_size:
                logger.warning(f"Skipping {file_path}: {size} bytes exceeds max_file_size")
                return []

            source = self._analyzer.load(file_path, project_root)
            chunks = extractor.extract(source, include_code=include_code, graph=graph)
            logger.debug(f"Extracted {len(chunks)} chunks from {source.file_path}")
            return chunks
        except Exception as e:
            logger.error(f"Error processing {file_path}: {e}", exc_info=True)
            return None
