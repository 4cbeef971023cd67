"""Configuration management for the SoloForge shell."""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional


@dataclass(frozen=True)
class Config:
    """Configuration settings for the SoloForge shell."""

    app_name: str = "SoloForge"

    # Session defaults applied at startup
    default_engine: str = "Mythic 2e"
    default_theme: str = "Fantasy"
    default_chaos: int = 5

    # Screen regions (rows) and panel widths (columns)
    title_height: int = 8
    footer_height: int = 2
    outer_width: int = 60
    session_width: int = 24
    menu_width: int = 30

    # Rich color names
    accent_color: str = "cyan"
    secondary_color: str = "blue"

    # FIGlet font used for the title
    title_font: str = "standard"

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build the configuration, applying environment overrides.

    Recognised variables: SOLOFORGE_LOG_LEVEL, SOLOFORGE_LOG_FILE.
    """
    env = os.environ if environ is None else environ
    config = Config()
    level = env.get("SOLOFORGE_LOG_LEVEL")
    if level:
        config = replace(config, log_level=level.upper())
    log_file = env.get("SOLOFORGE_LOG_FILE")
    if log_file:
        config = replace(config, log_file=os.path.expanduser(log_file))
    return config


# Default configuration instance
default_config = Config()
