"""
Shell Extractor - Extract the application shell spec from shell/spec.md.
"""

from typing import List, Optional

from .base import BaseExtractor, LineKind, join_text
from ..models import ShellSpec

OVERVIEW_SECTION = "overview"
NAVIGATION_SECTION = "navigation"
LAYOUT_SECTION = "layout"


class ShellExtractor(BaseExtractor):
    """Extractor for the shell specification. The raw text is kept verbatim."""

    @property
    def component_name(self) -> str:
        return "shell"

    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> ShellSpec:
        overview_parts: List[str] = []
        navigation_items: List[str] = []
        layout_parts: List[str] = []
        section: Optional[str] = None

        for line in self._scan(content):
            if line.kind is LineKind.SECTION:
                section = line.section_key
            elif line.kind is LineKind.LIST_ITEM:
                if section == NAVIGATION_SECTION:
                    navigation_items.append(line.text)
                elif section == OVERVIEW_SECTION:
                    overview_parts.append(line.text)
            elif line.kind is LineKind.PROSE:
                if section == OVERVIEW_SECTION:
                    overview_parts.append(line.text)
                elif section == LAYOUT_SECTION:
                    layout_parts.append(line.text)

        return ShellSpec(
            raw=content,
            overview=join_text(overview_parts),
            navigation_items=navigation_items,
            layout_pattern=join_text(layout_parts),
        )
