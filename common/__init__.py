"""Common utilities for the SoloForge shell."""

from common.config import Config, default_config, load_config
from common.logging_setup import setup_logging, get_logger

__all__ = ["Config", "default_config", "load_config", "setup_logging", "get_logger"]
