"""
Module entry-point that makes the package runnable with

    python -m zipstamp
    python -m zipstamp.cli

The behaviour is identical to the *zipstamp-cli* console script because the
Click **group** object imported below performs all CLI dispatching.
"""

from zipstamp.cli import main  # single public symbol needed

if __name__ == "__main__":  # pragma: no cover
    main()
