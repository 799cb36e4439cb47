"""
Product Models - Data structures for loaded product definitions.
"""

from .product_model import (
    # Enums
    DesignPhase,
    # Data classes
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
)
from .section_model import (
    ParsedSpec,
    ScreenDesignInfo,
    ScreenshotInfo,
    SectionData,
)

__all__ = [
    # Enums
    'DesignPhase',
    # Product records
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
    # Section records
    'ParsedSpec',
    'ScreenDesignInfo',
    'ScreenshotInfo',
    'SectionData',
]
