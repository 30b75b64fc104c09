"""Find related tests tool - page-object/test relationships from the last index run."""
import logging
from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)


def lookup_relationships(graph, name: str, direction: str = "tests") -> dict:
    """Query the relationship graph in either direction.

    Raises:
        ValueError: If direction is not "tests" or "classes"
    """
    if direction == "tests":
        return {"class": name, "test_files": list(graph.tests_for_class(name))}
    if direction == "classes":
        return {"test_file": name, "classes": list(graph.classes_for_test(name))}
    raise ValueError(f"Unknown direction: {direction} (expected 'tests' or 'classes')")


def register_find_related_tests(mcp: FastMCP, components) -> None:
    """Register the find_related_tests tool."""

    @mcp.tool()
    async def find_related_tests(name: str, direction: str = "tests") -> dict:
        """Find which test files import a page object, or which page objects a test file imports.

        **Use this tool when:**
        - Changing a page object and you need the tests that exercise it
        - Reviewing a spec file and you need the page objects it depends on

        Relationships come from the most recent index_codebase run with
        project_type="playwright". Test file paths are relative to the project root.

        **Direction options:**
        - "tests": name is a page-object class name; returns importing test files
        - "classes": name is a test file path; returns imported page-object classes

        Args:
            name: Class name or relative test file path
            direction: "tests" or "classes" (default: "tests")

        Returns:
            The requested side of the relationship graph
        """
        logger.info(f"find_related_tests called: name='{name}', direction={direction}")

        if components.last_result is None:
            return {"error": "No index available yet; run index_codebase first"}

        result = lookup_relationships(components.last_result.graph, name, direction)
        logger.debug(f"Relationships for {name}: {result}")
        return result
