"""Application configuration helpers."""

from __future__ import annotations

from .errors import BlankConfigurationError, ConfigurationError, UnsupportedBodsVersionError
from .logging import configure_logging
from .publication import PublicationConfig, get_publication_config

__all__ = [
    "BlankConfigurationError",
    "ConfigurationError",
    "PublicationConfig",
    "UnsupportedBodsVersionError",
    "configure_logging",
    "get_publication_config",
]
