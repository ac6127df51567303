"""Module entrypoint for ``python -m walktriage``.

All argument parsing and walk setup happen in ``walktriage.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
