"""Module wrapper so running ``python -m zipstamp.cli`` matches the console script."""

from zipstamp.cli import main  # Re-exported Click command-group


if __name__ == "__main__":  # pragma: no cover
    main()
