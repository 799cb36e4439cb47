"""
Product Data Models - Structured representation of a product definition.

Records are populated once at load time from the markdown and JSON files
under ``product/`` and never mutated afterwards.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any
from enum import Enum


class DesignPhase(Enum):
    """Ordered phases of the product design process."""
    PRODUCT = "product"
    DATA_MODEL = "data_model"
    DESIGN = "design"
    SECTIONS = "sections"
    SHELL = "shell"

    @property
    def label(self) -> str:
        """Human-readable phase title."""
        return {
            DesignPhase.PRODUCT: "Product",
            DesignPhase.DATA_MODEL: "Data Model",
            DesignPhase.DESIGN: "Design",
            DesignPhase.SECTIONS: "Sections",
            DesignPhase.SHELL: "Shell",
        }[self]


@dataclass(frozen=True)
class Problem:
    """A problem the product solves and how it solves it."""
    title: str
    solution: str


@dataclass(frozen=True)
class ProductOverview:
    """Product overview containing vision, problems, and features."""
    name: str
    description: str
    problems: List[Problem] = field(default_factory=list)
    features: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class RoadmapSection:
    """
    A section in the product roadmap.

    ``order`` is the zero-based position of the section in the roadmap file.
    """
    id: str
    title: str
    description: str
    order: int


@dataclass(frozen=True)
class ProductRoadmap:
    """Product roadmap with ordered sections."""
    sections: List[RoadmapSection] = field(default_factory=list)

    def get_section(self, section_id: str) -> Optional[RoadmapSection]:
        """Get a roadmap section by its id."""
        return next((s for s in self.sections if s.id == section_id), None)


@dataclass(frozen=True)
class Entity:
    """Core entity in the data model."""
    name: str
    description: str


@dataclass(frozen=True)
class DataModel:
    """Data model with entities and free-text relationships."""
    entities: List[Entity] = field(default_factory=list)
    relationships: List[str] = field(default_factory=list)

    def get_entity(self, name: str) -> Optional[Entity]:
        """Get an entity by name (case-insensitive)."""
        name_lower = name.lower()
        return next((e for e in self.entities if e.name.lower() == name_lower), None)


@dataclass(frozen=True)
class ColorTokens:
    """Color tokens for the design system."""
    primary: str
    secondary: str
    neutral: str


@dataclass(frozen=True)
class TypographyTokens:
    """Typography tokens for the design system."""
    heading: str
    body: str
    mono: str


@dataclass(frozen=True)
class DesignSystem:
    """Design system configuration. Each token group is independently optional."""
    colors: Optional[ColorTokens] = None
    typography: Optional[TypographyTokens] = None


@dataclass(frozen=True)
class ShellSpec:
    """Shell specification for the application shell."""
    raw: str
    overview: str
    navigation_items: List[str] = field(default_factory=list)
    layout_pattern: str = ""


@dataclass(frozen=True)
class ShellInfo:
    """Shell information including spec and components presence."""
    spec: Optional[ShellSpec] = None
    has_components: bool = False


@dataclass(frozen=True)
class PhaseStatus:
    """Completion state of one design phase."""
    phase: DesignPhase
    complete: bool

    @property
    def label(self) -> str:
        return self.phase.label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "label": self.label,
            "complete": self.complete,
        }


@dataclass(frozen=True)
class ProductData:
    """
    Complete product data.

    Any piece may be absent; a missing or malformed source file yields
    ``None`` for the matching field.
    """
    overview: Optional[ProductOverview] = None
    roadmap: Optional[ProductRoadmap] = None
    data_model: Optional[DataModel] = None
    design_system: Optional[DesignSystem] = None
    shell: Optional[ShellInfo] = None

    @property
    def is_empty(self) -> bool:
        """Whether no product artifact could be loaded."""
        return all(
            value is None
            for value in (self.overview, self.roadmap, self.data_model, self.design_system, self.shell)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return asdict(self)

    def summary(self) -> str:
        """Get a summary string of the loaded product."""
        name = self.overview.name if self.overview else "(no overview)"
        sections = len(self.roadmap.sections) if self.roadmap else 0
        entities = len(self.data_model.entities) if self.data_model else 0
        return (
            f"Product: {name}\n"
            f"  Roadmap sections: {sections}\n"
            f"  Entities: {entities}\n"
            f"  Design system: {'yes' if self.design_system else 'no'}\n"
            f"  Shell spec: {'yes' if self.shell and self.shell.spec else 'no'}"
        )
