"""Chunk extractors for each project profile."""
from analyzers.extractors.base import BaseExtractor
from analyzers.extractors.generic import GenericExtractor
from analyzers.extractors.playwright import (
    ExtractionStrategy,
    PlaywrightExtractor,
    ProjectProfile,
    is_test_file,
    select_strategy,
)

# Registry of extractors by project profile
EXTRACTORS = {
    ProjectProfile.GENERIC: GenericExtractor(),
    ProjectProfile.PLAYWRIGHT: PlaywrightExtractor(),
}


def get_extractor(profile: ProjectProfile | str) -> BaseExtractor:
    """Get extractor for a project profile.

    Args:
        profile: Profile name (generic, playwright)

    Returns:
        Appropriate extractor instance

    Raises:
        ValueError: If profile not supported
    """
    try:
        return EXTRACTORS[ProjectProfile(profile)]
    except ValueError:
        raise ValueError(f"No extractor available for project type: {profile}") from None


__all__ = [
    "BaseExtractor",
    "ExtractionStrategy",
    "GenericExtractor",
    "PlaywrightExtractor",
    "ProjectProfile",
    "get_extractor",
    "is_test_file",
    "select_strategy",
]
