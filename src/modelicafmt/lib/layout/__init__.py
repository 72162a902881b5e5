"""Default Modelica layout transform."""

from modelicafmt.lib.layout.transform import LayoutError, format_source, format_text

__all__ = ["LayoutError", "format_source", "format_text"]
