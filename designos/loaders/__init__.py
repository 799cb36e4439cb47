"""
Loaders module - Read a product definition folder into structured records.
"""

from .models import (
    DesignPhase,
    Problem,
    ProductOverview,
    RoadmapSection,
    ProductRoadmap,
    Entity,
    DataModel,
    ColorTokens,
    TypographyTokens,
    DesignSystem,
    ShellSpec,
    ShellInfo,
    PhaseStatus,
    ProductData,
    ParsedSpec,
    ScreenDesignInfo,
    ScreenshotInfo,
    SectionData,
)
from .errors import (
    LoaderError,
    ProductFileNotFoundError,
    InvalidJSONError,
    ParsingError,
)
from .product_loader import ProductLoader
from .section_loader import SectionLoader
from .extractors import (
    BaseExtractor,
    OverviewExtractor,
    RoadmapExtractor,
    DataModelExtractor,
    ShellExtractor,
    SectionSpecExtractor,
    ColorTokensExtractor,
    TypographyTokensExtractor,
)

__all__ = [
    # Models
    'DesignPhase',
    'Problem',
    'ProductOverview',
    'RoadmapSection',
    'ProductRoadmap',
    'Entity',
    'DataModel',
    'ColorTokens',
    'TypographyTokens',
    'DesignSystem',
    'ShellSpec',
    'ShellInfo',
    'PhaseStatus',
    'ProductData',
    'ParsedSpec',
    'ScreenDesignInfo',
    'ScreenshotInfo',
    'SectionData',
    # Errors
    'LoaderError',
    'ProductFileNotFoundError',
    'InvalidJSONError',
    'ParsingError',
    # Loaders
    'ProductLoader',
    'SectionLoader',
    # Extractors
    'BaseExtractor',
    'OverviewExtractor',
    'RoadmapExtractor',
    'DataModelExtractor',
    'ShellExtractor',
    'SectionSpecExtractor',
    'ColorTokensExtractor',
    'TypographyTokensExtractor',
]
