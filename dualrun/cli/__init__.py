"""
dualrun CLI Module

Command-line interface for inspecting gates and running examples.
"""

from .main import cli, main

__all__ = ["cli", "main"]
