"""Stable domain value newtypes."""

from typing import NewType

LineWidth = NewType("LineWidth", int)

UNBOUNDED_WIDTH = LineWidth(-1)
