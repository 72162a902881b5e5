"""Shared pytest fixtures for library and CLI checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from modelicafmt.lib.domain import FormatResult

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@dataclass(slots=True)
class RecordingTransform:
    """Deterministic stand-in transform that tags each buffer it sees."""

    calls: list[tuple[bytes, int]] = field(default_factory=list)
    fail_on: bytes | None = None

    def __call__(self, content: bytes, max_line_width: int) -> bytes:
        self.calls.append((content, max_line_width))
        if self.fail_on is not None and self.fail_on in content:
            raise ValueError("syntax error: unexpected token")
        return b"<" + content.strip() + b">"


@dataclass(slots=True)
class ListSink:
    results: list[FormatResult] = field(default_factory=list)

    def write(self, result: FormatResult) -> None:
        self.results.append(result)

    @property
    def names(self) -> list[str]:
        return [result.source.name for result in self.results]


def write_tree(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def transform() -> RecordingTransform:
    return RecordingTransform()


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    root = tmp_path / "lib"
    write_tree(
        root,
        {
            "Tank.mo": "model Tank\nend Tank;\n",
            "notes.txt": "not modelica\n",
            ".Hidden.mo": "model Hidden\nend Hidden;\n",
            "Fluid/package.mo": "package Fluid\nend Fluid;\n",
            "Fluid/Pipe.mo": "model Pipe\nend Pipe;\n",
            "Fluid/.cache/Stale.mo": "model Stale\nend Stale;\n",
            "Fluid/Valves/Check.mo": "model Check\nend Check;\n",
            "Zeta.mo": "model Zeta\nend Zeta;\n",
        },
    )
    (root / "Empty").mkdir()
    (root / "Dir.mo").mkdir()
    return root


@pytest.fixture
def cli_env(package_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    env.pop("MODELICAFMT_LINE_LENGTH", None)
    return env


@pytest.fixture
def run_modelicafmt(package_root: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(
        args: list[str],
        timeout: float = 15.0,
        cwd: Path | None = None,
        env: dict[str, str] | None = None,
    ) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "modelicafmt", *args],
            cwd=cwd or package_root,
            env=env or cli_env,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
