"""
Main module entry point.

Allows running the HTTP server as: python -m pulsecheck.main
"""

from .server import main

if __name__ == "__main__":
    main()
