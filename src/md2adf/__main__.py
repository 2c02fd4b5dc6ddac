"""Module entry point for running with python -m md2adf."""

from md2adf.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
