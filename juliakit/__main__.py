"""
Entry point for running juliakit CLI as a module.

Usage: python -m juliakit [command] [options]
"""

from juliakit.cli.parser import main

if __name__ == "__main__":
    main()
