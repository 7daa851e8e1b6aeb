"""Utility modules."""

from .config import ClientConfig, load_config
from .logging import get_logger, setup_logging

__all__ = ["ClientConfig", "load_config", "get_logger", "setup_logging"]
