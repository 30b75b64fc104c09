"""Analyzers module for syntax-tree based chunk extraction."""
from analyzers.base import ASTAnalyzer, ParsedSource
from analyzers.imports import ImportRelationshipAnalyzer, RelationshipGraph
from analyzers.tree_sitter import TreeSitterAnalyzer

__all__ = [
    "ASTAnalyzer",
    "ImportRelationshipAnalyzer",
    "ParsedSource",
    "RelationshipGraph",
    "TreeSitterAnalyzer",
]
