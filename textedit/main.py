from __future__ import annotations

import sys

from textedit.app import run_app


def main() -> int:
    """Module entrypoint for `python -m textedit.main` or `python -m textedit`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
