"""
`python -m tauri_liquid_icon` entrypoint.

This is mainly for convenience; the installed console script `tauri-liquid-icon`
calls the same `tauri_liquid_icon.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
