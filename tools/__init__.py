"""MCP tools for semantic chunk indexing."""
from tools.index_codebase import register_index_codebase
from tools.find_related_tests import register_find_related_tests

__all__ = [
    "register_index_codebase",
    "register_find_related_tests",
]
