from __future__ import annotations
import sys
from pyted.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pyted.main` and the `pyted` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
