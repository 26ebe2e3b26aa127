"""
Utilities for handling destination paths and template filenames.
"""

from pathlib import Path

from pathvalidate import ValidationError, validate_filename

TEMPLATE_SUFFIX = ".mdc"


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def is_safe_segment(name: str) -> bool:
    """
    Checks that a name can be used both as a single filesystem path segment and
    as a single URL path segment.
    """
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        return False
    if "?" in name or "#" in name or "%" in name:
        return False
    try:
        validate_filename(name + TEMPLATE_SUFFIX, platform="universal")
    except ValidationError:
        return False
    return True


def template_filename(name: str) -> str:
    """Returns the on-disk and remote filename for a canonical template name."""
    return f"{name}{TEMPLATE_SUFFIX}"
