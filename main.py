"""Development entrypoint for the Durland simulation."""

from __future__ import annotations

from durland.main import main

if __name__ == "__main__":
    main()
