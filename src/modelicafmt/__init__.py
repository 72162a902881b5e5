"""Batch formatter for Modelica source files."""

__version__ = "0.3.0"

# Overwritten by release builds.
__commit__ = "none"
__build_date__ = "unknown"
__built_by__ = "unknown"

__all__ = ["__build_date__", "__built_by__", "__commit__", "__version__"]
