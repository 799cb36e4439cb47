"""
Product Extractors - Parsers for the individual product files.

Each extractor handles a specific file kind:
- OverviewExtractor: product-overview.md
- RoadmapExtractor: product-roadmap.md
- DataModelExtractor: data-model/data-model.md
- ShellExtractor: shell/spec.md
- SectionSpecExtractor: sections/<id>/spec.md
- ColorTokensExtractor / TypographyTokensExtractor: design-system/*.json
"""

from .base import BaseExtractor, LineKind, ScannedLine, classify_line, scan_lines
from .overview_extractor import OverviewExtractor
from .roadmap_extractor import RoadmapExtractor
from .data_model_extractor import DataModelExtractor
from .shell_extractor import ShellExtractor
from .section_spec_extractor import SectionSpecExtractor
from .design_tokens_extractor import (
    DesignTokensExtractor,
    ColorTokensExtractor,
    TypographyTokensExtractor,
)

__all__ = [
    'BaseExtractor',
    'LineKind',
    'ScannedLine',
    'classify_line',
    'scan_lines',
    'OverviewExtractor',
    'RoadmapExtractor',
    'DataModelExtractor',
    'ShellExtractor',
    'SectionSpecExtractor',
    'DesignTokensExtractor',
    'ColorTokensExtractor',
    'TypographyTokensExtractor',
]
