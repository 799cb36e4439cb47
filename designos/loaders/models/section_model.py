"""
Section Data Models - Per-section spec, sample data and screen assets.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any


@dataclass(frozen=True)
class ParsedSpec:
    """Parsed section specification."""
    title: str
    overview: str
    user_flows: List[str] = field(default_factory=list)
    ui_requirements: List[str] = field(default_factory=list)
    use_shell: bool = False


@dataclass(frozen=True)
class ScreenDesignInfo:
    """
    Screen design file found in a section's ``designs/`` directory.

    ``component_name`` is empty unless the file is a UI component source.
    """
    name: str
    path: str
    component_name: str = ""

    @property
    def is_component(self) -> bool:
        return bool(self.component_name)


@dataclass(frozen=True)
class ScreenshotInfo:
    """Screenshot image found in a section's ``screenshots/`` directory."""
    name: str
    path: str
    url: str


@dataclass(frozen=True)
class SectionData:
    """Section data including spec, sample data, designs, and screenshots."""
    section_id: str
    spec: Optional[str] = None
    spec_parsed: Optional[ParsedSpec] = None
    data: Optional[Dict[str, Any]] = None
    screen_designs: List[ScreenDesignInfo] = field(default_factory=list)
    screenshots: List[ScreenshotInfo] = field(default_factory=list)

    @property
    def has_spec(self) -> bool:
        return self.spec is not None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return asdict(self)
