"""
Package entry point.

Allows running the application via:

    python -m termplanner

This simply forwards execution to termplanner.cli.main().
"""

from termplanner.cli import main

if __name__ == "__main__":
    main()
