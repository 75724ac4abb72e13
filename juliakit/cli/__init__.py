"""
juliakit CLI module.

This module provides the command-line interface for juliakit.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
