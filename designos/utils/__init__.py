"""
Utilities module - Common helper functions and classes.
"""

from .id_generator import (
    heading_to_id,
    extract_explicit_id,
    split_heading_id,
    file_stem,
)
from .logger import (
    setup_logging,
    get_logger,
    LogContext,
    log_exception,
)

__all__ = [
    # ID helpers
    'heading_to_id',
    'extract_explicit_id',
    'split_heading_id',
    'file_stem',
    # Logging
    'setup_logging',
    'get_logger',
    'LogContext',
    'log_exception',
]
