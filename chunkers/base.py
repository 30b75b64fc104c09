"""Chunk data model shared by every extractor."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

ANONYMOUS = "<anonymous>"


class ChunkKind(str, Enum):
    """Closed set of chunk categories.

    The generic profile only produces the first five members.
    """
    FUNCTION = "function"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    CLASS = "class"
    TEST = "test"
    LOCATOR = "locator"
    ACTION = "action"
    ASSERT = "assert"
    HELPER = "helper"
    SETUP = "setup"
    FIXTURE = "fixture"
    CONSTANT = "constant"
    IIFE = "iife"


@dataclass(frozen=True)
class Location:
    """Position of a chunk; columns are byte offsets from the preceding newline."""
    file: str
    start_line: int
    end_line: int
    start_column: int
    end_column: int

    def __post_init__(self):
        if (self.end_line, self.end_column) < (self.start_line, self.start_column):
            raise ValueError(
                f"Location end precedes start: {self.file}:{self.start_line}:{self.start_column}"
                f" > {self.end_line}:{self.end_column}"
            )

    def to_record(self) -> dict:
        return {
            "file": self.file,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "startColumn": self.start_column,
            "endColumn": self.end_column,
        }


@dataclass(frozen=True)
class Chunk:
    """Represents one extracted and classified unit of source."""
    name: str
    kind: ChunkKind
    location: Location

    code: Optional[str] = None            # Only set when the caller asks for source
    documentation: Optional[str] = None

    # Playwright profile metadata
    owning_class: Optional[str] = None
    member_names: Optional[str] = None    # Comma-joined for multi-member chunks
    repository: Optional[str] = None
    module: Optional[str] = None
    related_test_files: tuple[str, ...] = field(default_factory=tuple)
    test_suite_name: Optional[str] = None
    test_case_name: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, "name", ANONYMOUS)
        if not isinstance(self.kind, ChunkKind):
            object.__setattr__(self, "kind", ChunkKind(self.kind))

    def to_record(self) -> dict:
        """Serialize to the external chunk record, omitting unset fields."""
        record: dict = {
            "name": self.name,
            "kind": self.kind.value,
            "location": self.location.to_record(),
        }
        optional = {
            "code": self.code,
            "documentation": self.documentation,
            "owningClass": self.owning_class,
            "memberNames": self.member_names,
            "repository": self.repository,
            "module": self.module,
            "relatedTestFiles": list(self.related_test_files) if self.related_test_files else None,
            "testSuiteName": self.test_suite_name,
            "testCaseName": self.test_case_name,
        }
        for key, value in optional.items():
            if value is not None:
                record[key] = value
        return record
