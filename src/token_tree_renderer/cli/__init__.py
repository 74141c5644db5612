"""Command-line interface for the token tree renderer."""

from .main import main

__all__ = ["main"]
