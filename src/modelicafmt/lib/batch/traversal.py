"""Depth-first directory traversal yielding eligible source files."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

import structlog

from modelicafmt.lib.batch.classify import is_eligible
from modelicafmt.lib.domain import SourcePath

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

logger = structlog.get_logger(__name__)


def _list_dir(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def walk(root: Path, on_error: Callable[[OSError], None]) -> Iterator[SourcePath]:
    """Yield eligible files under ``root`` lazily, in lexical depth-first order.

    Entries that vanish between listing and inspection are skipped without a
    report. Any other ``OSError`` is passed to ``on_error`` and the walk moves
    on to the next sibling. A symlink given as ``root`` is resolved; symlinks
    met below it are not followed.
    """

    try:
        root_stat = os.stat(root)
    except FileNotFoundError:
        return
    except OSError as exc:
        on_error(exc)
        return
    yield from _visit(SourcePath.from_path(root, is_dir=stat.S_ISDIR(root_stat.st_mode)), on_error)


def _visit(entry: SourcePath, on_error: Callable[[OSError], None]) -> Iterator[SourcePath]:
    if not entry.is_dir:
        if is_eligible(entry):
            yield entry
        return

    try:
        children = _list_dir(entry.path)
    except FileNotFoundError:
        logger.debug("Directory vanished before listing.", path=str(entry.path))
        return
    except OSError as exc:
        on_error(exc)
        return

    for child in children:
        try:
            source = SourcePath.from_dir_entry(child)
        except FileNotFoundError:
            logger.debug("Entry vanished before inspection.", path=child.path)
            continue
        except OSError as exc:
            on_error(exc)
            continue
        yield from _visit(source, on_error)
