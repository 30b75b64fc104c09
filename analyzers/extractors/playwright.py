"""Playwright profile: dispatch per file to test, page-object or fallback extraction.

The strategy is picked from the file name before any node is inspected.
Each strategy runs an ordered chain of tiers and the first tier that
produces chunks wins:

    TEST_FILE    tests -> edge cases -> generic
    OBJECT_FILE  page objects -> edge cases -> generic
                 (only when the file declares no classes)
    GENERIC      generic
"""
import logging
from enum import Enum
from pathlib import PurePosixPath
from analyzers.base import ParsedSource
from analyzers.extractors.base import BaseExtractor
from analyzers.extractors.edge_cases import EdgeCaseExtractor
from analyzers.extractors.generic import GenericExtractor
from analyzers.extractors.page_objects import PageObjectExtractor, declares_classes
from analyzers.extractors.test_cases import TestCaseExtractor
from analyzers.imports import RelationshipGraph
from chunkers.base import Chunk

logger = logging.getLogger(__name__)

TEST_FILE_SUFFIXES = (".spec.ts", ".spec.js", ".api-spec.ts", ".api-spec.js")
SETUP_FILE_MARKER = ".setup"


class ProjectProfile(str, Enum):
    GENERIC = "generic"
    PLAYWRIGHT = "playwright"


class ExtractionStrategy(str, Enum):
    GENERIC = "generic"
    TEST_FILE = "test_file"
    OBJECT_FILE = "object_file"


class Tier(str, Enum):
    TESTS = "tests"
    PAGE_OBJECTS = "page_objects"
    EDGE_CASES = "edge_cases"
    GENERIC = "generic"


FALLBACK_CHAINS: dict[ExtractionStrategy, tuple[Tier, ...]] = {
    ExtractionStrategy.TEST_FILE: (Tier.TESTS, Tier.EDGE_CASES, Tier.GENERIC),
    ExtractionStrategy.OBJECT_FILE: (Tier.PAGE_OBJECTS, Tier.EDGE_CASES, Tier.GENERIC),
    ExtractionStrategy.GENERIC: (Tier.GENERIC,),
}


def is_test_file(file_path: str) -> bool:
    """Spec, api-spec and setup files are test files; everything else is an object file."""
    file_name = PurePosixPath(file_path.replace("\\", "/")).name
    return file_name.endswith(TEST_FILE_SUFFIXES) or SETUP_FILE_MARKER in file_name


def select_strategy(profile: ProjectProfile, file_path: str) -> ExtractionStrategy:
    if profile != ProjectProfile.PLAYWRIGHT:
        return ExtractionStrategy.GENERIC
    if is_test_file(file_path):
        return ExtractionStrategy.TEST_FILE
    return ExtractionStrategy.OBJECT_FILE


class PlaywrightExtractor(BaseExtractor):
    """Extract tests, locators, actions and fixtures from a Playwright project."""

    def __init__(self):
        self._tiers: dict[Tier, BaseExtractor] = {
            Tier.TESTS: TestCaseExtractor(),
            Tier.PAGE_OBJECTS: PageObjectExtractor(),
            Tier.EDGE_CASES: EdgeCaseExtractor(),
            Tier.GENERIC: GenericExtractor(),
        }

    def extract(
        self,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        strategy = select_strategy(ProjectProfile.PLAYWRIGHT, source.file_path)
        return self.run_chain(strategy, source, include_code, graph)

    def run_chain(
        self,
        strategy: ExtractionStrategy,
        source: ParsedSource,
        include_code: bool = False,
        graph: RelationshipGraph | None = None,
    ) -> list[Chunk]:
        """Run the strategy's tiers in order, returning the first non-empty result."""
        for tier in FALLBACK_CHAINS[strategy]:
            chunks = self._tiers[tier].extract(source, include_code, graph)
            if chunks:
                logger.debug(f"{source.file_path}: {strategy.value} resolved by {tier.value} tier")
                return chunks
            # A file that declares classes is settled by the page-object tier
            if tier == Tier.PAGE_OBJECTS and declares_classes(source.root):
                return []
        return []
