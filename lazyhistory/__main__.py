"""Module entrypoint for ``python -m lazyhistory``."""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
