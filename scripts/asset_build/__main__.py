"""CLI entry point for asset_build package.

Usage:
    python -m asset_build build
    python -m asset_build task styles
    python -m asset_build sprite a.svg b.svg -o sprite.html
"""

from .cli import main

if __name__ == "__main__":
    main()
