#!/usr/bin/env python3
"""Timer Boss entry point.

Run with:
    python main.py
    python -m timerboss
"""

from timerboss.__main__ import main


if __name__ == "__main__":
    main()
