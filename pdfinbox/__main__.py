"""Module entrypoint for ``python -m pdfinbox``.

All argument parsing and runtime setup happen in ``pdfinbox.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
