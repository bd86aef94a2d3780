"""Module entry point for the hashmatch CLI."""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
