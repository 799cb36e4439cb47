"""
Overview Extractor - Extract the product overview from product-overview.md.

Extracts:
- Product name (``# Title``)
- Description (prose under ``## Overview``)
- Problems (``### Title`` + solution text under ``## Problems``)
- Features (list items under ``## Features``)
"""

from typing import List, Optional

from .base import BaseExtractor, LineKind, SubItemAccumulator, join_text
from ..errors import ParsingError
from ..models import ProductOverview, Problem
from ...utils.logger import get_logger

logger = get_logger(__name__)

OVERVIEW_SECTION = "overview"
PROBLEMS_SECTION = "problems"
FEATURES_SECTION = "features"


class OverviewExtractor(BaseExtractor):
    """
    Extractor for the product overview.

    The level-1 title is mandatory; every other piece falls back to an
    empty value when its section is missing.
    """

    @property
    def component_name(self) -> str:
        return "overview"

    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> ProductOverview:
        """
        Extract the product overview.

        Args:
            content: Raw markdown text
            source: Optional source path for error messages

        Returns:
            ProductOverview record

        Raises:
            ParsingError: If the document has no ``# Title`` line
        """
        name: Optional[str] = None
        description_parts: List[str] = []
        features: List[str] = []
        problems: List[Problem] = []
        problem = SubItemAccumulator()
        section: Optional[str] = None

        def close_problem(finished) -> None:
            if finished is None:
                return
            title, solution = finished
            if solution:
                problems.append(Problem(title=title, solution=solution))
            else:
                logger.debug(f"Dropping problem without solution: {title}")

        for line in self._scan(content):
            if line.kind is LineKind.TITLE:
                name = line.text
            elif line.kind is LineKind.SECTION:
                close_problem(problem.flush())
                section = line.section_key
            elif line.kind is LineKind.SUBITEM:
                if section == PROBLEMS_SECTION:
                    close_problem(problem.start(line.text))
            elif line.kind is LineKind.LIST_ITEM:
                if section == FEATURES_SECTION:
                    features.append(line.text)
                elif section == PROBLEMS_SECTION and problem.is_open:
                    problem.add(line.text)
            elif section == OVERVIEW_SECTION:
                description_parts.append(line.text)
            elif section == PROBLEMS_SECTION and problem.is_open:
                problem.add(line.text)

        close_problem(problem.flush())

        if not name:
            raise ParsingError("Missing product name", path=source)

        return ProductOverview(
            name=name,
            description=join_text(description_parts),
            problems=problems,
            features=features,
        )
