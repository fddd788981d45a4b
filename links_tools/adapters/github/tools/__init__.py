"""GitHub tools package.

Exports all GitHub tools for easy importing.
"""

from .links import LinksTool

__all__ = ["LinksTool"]
