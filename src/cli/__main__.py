"""Module entrypoint for the result-table CLI."""

from __future__ import annotations

from cli.app import main

if __name__ == "__main__":
    main()
