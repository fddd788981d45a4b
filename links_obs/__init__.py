"""
Issue-links Observability Package.

Structured logging (structlog) shared by the tool modules.
"""

from links_obs.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
