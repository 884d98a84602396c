"""Module entry point for ``python -m texcite``."""

from texcite.ui.cli import main


if __name__ == "__main__":
    main()
