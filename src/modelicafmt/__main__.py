"""Module entry point for `python -m modelicafmt`."""

from modelicafmt.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
