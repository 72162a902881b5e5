"""Core frozen domain dataclasses."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from modelicafmt.lib.types import UNBOUNDED_WIDTH, LineWidth


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Run-wide settings, built once per invocation and never mutated."""

    overwrite: bool = False
    max_line_width: LineWidth = UNBOUNDED_WIDTH

    def __post_init__(self) -> None:
        if isinstance(self.max_line_width, bool) or not isinstance(self.max_line_width, int):
            raise ValueError(
                f"max_line_width must be an int, got {type(self.max_line_width).__name__}."
            )
        if self.max_line_width != UNBOUNDED_WIDTH and self.max_line_width <= 0:
            raise ValueError(
                f"max_line_width must be -1 (unbounded) or positive, got {self.max_line_width}."
            )

    @property
    def unbounded(self) -> bool:
        return self.max_line_width == UNBOUNDED_WIDTH


@dataclass(frozen=True, slots=True)
class SourcePath:
    """One discovered filesystem entry with the metadata read at discovery time."""

    path: Path
    name: str
    is_dir: bool

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> SourcePath:
        """Build from a scandir entry without following symlinks.

        May raise ``OSError`` when the entry cannot be inspected.
        """

        return cls(
            path=Path(entry.path),
            name=entry.name,
            is_dir=entry.is_dir(follow_symlinks=False),
        )

    @classmethod
    def from_path(cls, path: Path, *, is_dir: bool) -> SourcePath:
        return cls(path=path, name=path.name, is_dir=is_dir)


@dataclass(frozen=True, slots=True)
class FormatRequest:
    """Unit of work handed to the formatting transform."""

    source: SourcePath
    max_line_width: LineWidth = UNBOUNDED_WIDTH


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Formatted bytes for one source, consumed once by an output sink."""

    source: SourcePath
    content: bytes


@dataclass(frozen=True, slots=True)
class RunReport:
    """Summary of one completed batch run."""

    files_formatted: int = 0
    walk_errors: int = 0
