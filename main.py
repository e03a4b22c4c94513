"""
Ride Sharing Console
====================
Entry point. Run with: python main.py  (or the ``ridesharing`` script)
"""

from ridesharing.cli.app import main

if __name__ == "__main__":
    raise SystemExit(main())
