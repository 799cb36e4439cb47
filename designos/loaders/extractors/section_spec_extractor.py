"""
Section Spec Extractor - Extract a section's spec.md.

Extracts:
- Title (``# Title``, empty when absent)
- Overview (prose under ``## Overview``)
- User flows (list items under ``## User Flows``)
- UI requirements (list items under ``## UI Requirements``)
- Whether the section renders inside the application shell
"""

from typing import List, Optional

from .base import BaseExtractor, LineKind, join_text
from ..models import ParsedSpec

OVERVIEW_SECTION = "overview"
USER_FLOWS_SECTION = "user flows"
UI_REQUIREMENTS_SECTION = "ui requirements"


class SectionSpecExtractor(BaseExtractor):
    """Extractor for section specifications."""

    @property
    def component_name(self) -> str:
        return "section_spec"

    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> ParsedSpec:
        title = ""
        overview_parts: List[str] = []
        user_flows: List[str] = []
        ui_requirements: List[str] = []
        section: Optional[str] = None

        for line in self._scan(content):
            if line.kind is LineKind.TITLE:
                title = line.text
            elif line.kind is LineKind.SECTION:
                section = line.section_key
            elif line.kind is LineKind.LIST_ITEM:
                if section == USER_FLOWS_SECTION:
                    user_flows.append(line.text)
                elif section == UI_REQUIREMENTS_SECTION:
                    ui_requirements.append(line.text)
            elif line.kind is LineKind.PROSE and section == OVERVIEW_SECTION:
                overview_parts.append(line.text)

        return ParsedSpec(
            title=title,
            overview=join_text(overview_parts),
            user_flows=user_flows,
            ui_requirements=ui_requirements,
            use_shell=self._detect_shell_usage(content),
        )

    def _detect_shell_usage(self, content: str) -> bool:
        """Keyword check: the text mentions both "shell" and "use" anywhere."""
        content_lower = content.lower()
        return "shell" in content_lower and "use" in content_lower
