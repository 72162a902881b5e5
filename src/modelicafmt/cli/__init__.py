"""Command-line surface for modelicafmt."""
