"""Module entrypoint for ``python -m wrapviewer``.

All argument parsing and runtime setup happen in ``wrapviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
