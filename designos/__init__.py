"""
DesignOS - Load hand-authored product definitions into structured records.

Main modules:
- loaders: Parse product markdown/JSON files and enumerate sections
- core: Configuration
- utils: Logging and id helpers
- cli: Command-line interface
"""

from .cli import load_project

__version__ = "1.0.0"

__all__ = [
    'load_project',
    '__version__',
]
