"""Module entrypoint for ``python -m lazytap``.

All argument parsing and runtime setup happen in ``lazytap.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
