"""Module entry point for running with python -m tocsmith."""

from tocsmith.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
