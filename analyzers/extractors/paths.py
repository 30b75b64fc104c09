"""Repository and module names inferred from path segments.

These follow a ``projects``/``repos``/``src`` and ``src``/``tests``/``page-objects``
directory convention. Files laid out differently fall back to ``unknown`` and
to the parent directory name.
"""
import posixpath

REPOSITORY_MARKERS = ("projects", "repos", "src")
MODULE_MARKERS = ("src", "tests", "page-objects")
UNKNOWN_REPOSITORY = "unknown"


def _segments(file_path: str) -> list[str]:
    return file_path.replace("\\", "/").split("/")


def _first_marker_index(parts: list[str], markers: tuple[str, ...]) -> int:
    for index, part in enumerate(parts):
        if part in markers:
            return index
    return -1


def extract_repository(file_path: str) -> str:
    """First segment after a repository marker that is not the first segment."""
    parts = _segments(file_path)
    index = _first_marker_index(parts, REPOSITORY_MARKERS)
    if index > 0 and index + 1 < len(parts) and parts[index + 1]:
        return parts[index + 1]
    return UNKNOWN_REPOSITORY


def extract_module(file_path: str) -> str:
    """First segment after a module marker, else the parent directory name."""
    parts = _segments(file_path)
    index = _first_marker_index(parts, MODULE_MARKERS)
    if index >= 0 and index + 1 < len(parts) and parts[index + 1]:
        return parts[index + 1]
    return posixpath.basename(posixpath.dirname("/".join(parts))) or "."
