"""
Entry point for running juliakit CLI as a module.

Usage: python -m juliakit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
