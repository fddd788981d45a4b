"""
Issue-links Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from links_config.settings import Settings

__all__ = ["Settings"]
