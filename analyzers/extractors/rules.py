"""Keyword rules that classify a page object's merged methods.

Rules are evaluated in order and the first match wins, so assertion
vocabulary takes precedence over interaction vocabulary.
"""
from dataclasses import dataclass
from chunkers.base import ChunkKind


@dataclass(frozen=True)
class KeywordRule:
    """Match when any body term occurs in the method source or any name term in a method name."""
    kind: ChunkKind
    body_terms: tuple[str, ...]
    name_terms: tuple[str, ...]

    def matches(self, method_names: list[str], body: str) -> bool:
        body_lower = body.lower()
        names_lower = " ".join(method_names).lower()
        return (
            any(term in body_lower for term in self.body_terms)
            or any(term in names_lower for term in self.name_terms)
        )


MEMBER_KIND_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        kind=ChunkKind.ASSERT,
        body_terms=("expect", "assert"),
        name_terms=("verify", "check", "should", "assert"),
    ),
    KeywordRule(
        kind=ChunkKind.ACTION,
        body_terms=("click", "fill", "goto", ".selectoption"),
        name_terms=("click", "navigate", "select", "type", "submit", "open", "close", "drag", "drop"),
    ),
)

DEFAULT_MEMBER_KIND = ChunkKind.HELPER


def classify_members(
    method_names: list[str],
    body: str,
    rules: tuple[KeywordRule, ...] = MEMBER_KIND_RULES,
) -> ChunkKind:
    """Kind for a group of methods given their names and combined source."""
    for rule in rules:
        if rule.matches(method_names, body):
            return rule.kind
    return DEFAULT_MEMBER_KIND
