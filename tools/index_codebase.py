"""Index codebase tool - extract semantic chunks and write them to JSON."""
import logging
from pathlib import Path
from mcp.server.fastmcp import FastMCP
from index.output import save_chunks_to_json

logger = logging.getLogger(__name__)


def register_index_codebase(mcp: FastMCP, components) -> None:
    """Register the index_codebase tool."""

    @mcp.tool()
    async def index_codebase(
        path: str | None = None,
        target: str | None = None,
        include_code: bool | None = None,
        project_type: str | None = None,
        output: str | None = None,
    ) -> dict:
        """Extract semantic chunks (functions, classes, tests, locators, fixtures) from a JS/TS project.

        **Use this tool when:**
        - Preparing a codebase for embedding or semantic search
        - Mapping which Playwright tests exercise which page objects
        - Getting an overview of tests, locators and actions in a test suite

        **Project types:**
        - "generic": functions, classes, methods and constructors
        - "playwright": test cases, locators, grouped page-object actions/assertions,
          fixtures, setup blocks, exported constants and IIFEs, plus the
          page-object <-> test relationships

        Args:
            path: Project root to scan (defaults to the configured project root)
            target: Optional subdirectory within the project root
            include_code: Include source code in each chunk (defaults to configuration)
            project_type: "generic" or "playwright" (defaults to configuration)
            output: JSON file to write (defaults to the configured output path)

        Returns:
            Totals per chunk kind, the output file path and any files that failed
        """
        logger.info(f"index_codebase called: path={path}, target={target}, project_type={project_type}")

        result = components.index_manager.index(
            path=path,
            target=target,
            include_code=include_code,
            project_type=project_type,
        )
        components.last_result = result

        output_path = Path(output or components.settings.output_path)
        saved = save_chunks_to_json(result.chunks, output_path)

        summary = result.summary()
        summary["output"] = str(saved)
        logger.info(f"Indexing complete: {summary['total']} chunks, by kind {summary['by_kind']}")
        return summary
