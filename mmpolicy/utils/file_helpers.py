"""File helper utilities for mmpolicy.

This module provides common path operations used across the package.
"""

from pathlib import Path
from typing import Optional

from .constants import SUPPORTED_CONFIG_FORMATS


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path.

    Args:
        file_path: File path

    Returns:
        File extension (without dot), empty string if no extension
    """
    path = Path(file_path)
    return path.suffix.lstrip(".").lower()


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported config format.

    Args:
        file_path: File path to check

    Returns:
        True if format is supported
    """
    extension = get_file_extension(file_path)
    return extension in SUPPORTED_CONFIG_FORMATS


def file_name_component(path: Path) -> Optional[str]:
    """Return the final path component if it can serve as a file name.

    `pathlib` reports an empty name for roots and empty paths, and keeps
    `..` as a literal component; neither names a file.

    Args:
        path: Path to inspect

    Returns:
        The final component, or None if there is none
    """
    name = path.name
    if name in ("", ".", ".."):
        return None
    return name
