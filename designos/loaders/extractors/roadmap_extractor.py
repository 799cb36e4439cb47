"""
Roadmap Extractor - Extract ordered roadmap sections from product-roadmap.md.

Every ``## Heading`` opens a section. A ``{custom-id}`` marker in the
heading sets the section id; otherwise the id is derived from the heading.
"""

from typing import List, Optional

from .base import BaseExtractor, LineKind, join_text
from ..models import ProductRoadmap, RoadmapSection
from ...utils.id_generator import split_heading_id
from ...utils.logger import get_logger

logger = get_logger(__name__)


class RoadmapExtractor(BaseExtractor):
    """Extractor for the product roadmap."""

    @property
    def component_name(self) -> str:
        return "roadmap"

    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> ProductRoadmap:
        """
        Extract roadmap sections in order of appearance.

        Text before the first section and the document title are dropped.
        List items and sub-headings inside a section become part of its
        description.

        Args:
            content: Raw markdown text
            source: Optional source path (unused, no failure modes)

        Returns:
            ProductRoadmap, possibly with no sections
        """
        sections: List[RoadmapSection] = []
        current_id: Optional[str] = None
        current_title: str = ""
        description_parts: List[str] = []

        def close_section() -> None:
            if current_id is None:
                return
            sections.append(RoadmapSection(
                id=current_id,
                title=current_title,
                description=join_text(description_parts),
                order=len(sections),
            ))

        for line in self._scan(content):
            if line.kind is LineKind.SECTION:
                close_section()
                current_id, current_title = split_heading_id(line.text)
                description_parts = []
            elif line.kind is LineKind.TITLE:
                continue
            elif current_id is not None:
                description_parts.append(line.text)

        close_section()

        logger.debug(f"Extracted {len(sections)} roadmap sections")
        return ProductRoadmap(sections=sections)
