"""Eligibility rules for files found during directory traversal."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modelicafmt.lib.domain import SourcePath

SOURCE_SUFFIX = ".mo"
HIDDEN_PREFIX = "."


def is_eligible(entry: SourcePath) -> bool:
    """Return whether a walked entry should be formatted.

    >>> from pathlib import Path
    >>> from modelicafmt.lib.domain import SourcePath
    >>> is_eligible(SourcePath.from_path(Path("pkg/Tank.mo"), is_dir=False))
    True
    >>> is_eligible(SourcePath.from_path(Path("pkg/.Tank.mo"), is_dir=False))
    False
    """
    if entry.is_dir:
        return False
    return not entry.name.startswith(HIDDEN_PREFIX) and entry.name.endswith(SOURCE_SUFFIX)
