"""MCP Chunk Indexer Server - Semantic chunk extraction for JS/TS and Playwright projects.

Usage:
    uv run main.py                    # stdio transport (default)
    mcp run main.py                   # via mcp CLI
"""
import logging
from contextlib import asynccontextmanager
from mcp.server.fastmcp import FastMCP

from settings.config import get_settings
from analyzers.tree_sitter import TreeSitterAnalyzer
from index.manager import IndexManager
from tools import register_index_codebase, register_find_related_tests

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize settings at module level
settings = get_settings()


# Global component references (initialized in lifespan)
class Components:
    settings = settings
    analyzer = None
    index_manager = None
    last_result = None

components = Components()

@asynccontextmanager
async def lifespan(server: FastMCP):
    """Manage component lifecycle - runs on server startup/shutdown."""
    logger.info("Initializing tree-sitter analyzer...")
    components.analyzer = TreeSitterAnalyzer()
    components.index_manager = IndexManager(settings, components.analyzer)
    logger.info("MCP Chunk Indexer server ready!")

    yield  # Server runs here

    logger.info("Shutting down...")

# Create MCP server
mcp = FastMCP(name="mcp-chunk-indexer", lifespan=lifespan)

# Register tools
register_index_codebase(mcp, components)
register_find_related_tests(mcp, components)

if __name__ == "__main__":
    mcp.run()
