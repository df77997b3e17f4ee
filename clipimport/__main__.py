"""Module entrypoint for running clipimport as ``python -m clipimport``."""

from __future__ import annotations

from clipimport.cli import main


if __name__ == "__main__":
    main()
