"""Span, column and comment helpers shared by the extractors.

Columns are byte offsets from the preceding newline, which is also what
tree-sitter reports in ``start_point``/``end_point``.
"""
import re
from tree_sitter import Node
from analyzers.base import ParsedSource
from chunkers.base import Location

# Nodes that carry the comments written above the node they wrap
COMMENT_ANCHOR_PARENTS = frozenset({
    "export_statement",
    "expression_statement",
    "lexical_declaration",
    "variable_declaration",
    "variable_declarator",
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "await_expression",
})

_COMMENT_DELIMITERS = re.compile(r"/\*\*?|\*/|//|\*")
_LEADING_QUOTE = re.compile(r"^[\"'`]")
_TRAILING_QUOTE = re.compile(r"[\"'`]$")


def node_location(source: ParsedSource, node: Node) -> Location:
    return Location(
        file=source.file_path,
        start_line=node.start_point[0] + 1,
        end_line=node.end_point[0] + 1,
        start_column=node.start_point[1],
        end_column=node.end_point[1],
    )


def span_location(source: ParsedSource, first: Node, last: Node) -> Location:
    """Location running from the start of ``first`` to the end of ``last``."""
    return Location(
        file=source.file_path,
        start_line=first.start_point[0] + 1,
        end_line=last.end_point[0] + 1,
        start_column=first.start_point[1],
        end_column=last.end_point[1],
    )


def strip_quotes(text: str) -> str:
    """Value of a string-like literal given its source text."""
    return _TRAILING_QUOTE.sub("", _LEADING_QUOTE.sub("", text)).strip()


def comment_anchor(node: Node) -> Node:
    """Climb to the outermost statement-level wrapper of a node.

    Comments above ``export const x = () => {}`` are siblings of the export
    statement, not of the arrow function.
    """
    current = node
    while current.parent is not None and current.parent.type in COMMENT_ANCHOR_PARENTS:
        current = current.parent
    return current


def leading_comments(node: Node) -> list[Node]:
    """Comment nodes directly above a node, in source order."""
    comments: list[Node] = []
    cursor = comment_anchor(node).prev_sibling
    while cursor is not None and cursor.type == "comment":
        comments.insert(0, cursor)
        cursor = cursor.prev_sibling

    # A comment sharing a line with the previous statement trails that statement
    if comments and cursor is not None and cursor.end_point[0] == comments[0].start_point[0]:
        comments.pop(0)
    return comments


def _doc_comment_lines(text: str) -> list[str]:
    body = text[3:]
    if body.endswith("*/"):
        body = body[:-2]
    lines = []
    for line in body.splitlines():
        line = line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        lines.append(line)
    return lines


def strip_doc_tags(text: str) -> str:
    """Body of a ``/** ... */`` block with ``@tag`` lines removed."""
    lines = [line for line in _doc_comment_lines(text) if not line.startswith("@")]
    return "\n".join(lines).strip()


def has_doc_comment(node: Node) -> bool:
    return any(c.text.startswith(b"/**") for c in leading_comments(node))


def doc_comment(node: Node) -> str | None:
    """Doc-comment text attached to a node, tag lines stripped."""
    descriptions = []
    for comment in leading_comments(node):
        text = comment.text.decode("utf8", errors="replace")
        if not text.startswith("/**"):
            continue
        description = strip_doc_tags(text)
        if description:
            descriptions.append(description)
    return "\n".join(descriptions) or None


def plain_comment_text(node: Node) -> str | None:
    """All leading comments joined, with comment delimiters removed."""
    comments = leading_comments(node)
    if not comments:
        return None
    joined = "\n".join(c.text.decode("utf8", errors="replace") for c in comments)
    return _COMMENT_DELIMITERS.sub("", joined).strip() or None
