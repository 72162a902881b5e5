"""Eligibility rules for walked entries."""

from __future__ import annotations

from pathlib import Path

import pytest

from modelicafmt.lib.batch.classify import is_eligible
from modelicafmt.lib.domain import SourcePath


@pytest.mark.parametrize(
    "name,is_dir,expected",
    [
        pytest.param("Tank.mo", False, True, id="source-file"),
        pytest.param("package.mo", False, True, id="package-file"),
        pytest.param(".Tank.mo", False, False, id="hidden-file"),
        pytest.param("Tank.mos", False, False, id="script-extension"),
        pytest.param("Tank.mo.bak", False, False, id="backup-suffix"),
        pytest.param("README", False, False, id="no-extension"),
        pytest.param("Dir.mo", True, False, id="directory-with-suffix"),
        pytest.param(".git", True, False, id="hidden-directory"),
    ],
)
def test_is_eligible(name: str, is_dir: bool, expected: bool) -> None:
    entry = SourcePath.from_path(Path("lib") / name, is_dir=is_dir)
    assert is_eligible(entry) is expected


def test_is_eligible_reads_only_supplied_metadata(tmp_path: Path) -> None:
    # The path does not exist; classification must not touch the filesystem.
    entry = SourcePath.from_path(tmp_path / "missing" / "Ghost.mo", is_dir=False)
    assert is_eligible(entry) is True
