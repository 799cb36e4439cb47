"""
Core module - Configuration shared by loaders and the CLI.
"""

from .config import (
    PathsConfig,
    SectionConfig,
    OutputConfig,
    LoggingConfig,
    AppConfig,
    get_default_config,
    load_config,
)

__all__ = [
    'PathsConfig',
    'SectionConfig',
    'OutputConfig',
    'LoggingConfig',
    'AppConfig',
    'get_default_config',
    'load_config',
]
