"""Entry point for ``python -m dpumon``."""

from dpumon.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
