"""
Core utilities and configuration for movie_db.

This package provides core functionality including logging configuration,
settings, error types and the database layer.
"""

from movie_db.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
