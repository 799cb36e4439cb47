"""
Data Model Extractor - Extract entities and relationships from data-model.md.
"""

from typing import List, Optional

from .base import BaseExtractor, LineKind, SubItemAccumulator
from ..models import DataModel, Entity
from ...utils.logger import get_logger

logger = get_logger(__name__)

ENTITIES_SECTION = "entities"
RELATIONSHIPS_SECTION = "relationships"


class DataModelExtractor(BaseExtractor):
    """
    Extractor for the data model.

    Under ``## Entities`` each ``### Name`` heading opens an entity whose
    description is the prose and list items that follow it. Under
    ``## Relationships`` each list item is one relationship.
    """

    @property
    def component_name(self) -> str:
        return "data_model"

    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> DataModel:
        entities: List[Entity] = []
        relationships: List[str] = []
        entity = SubItemAccumulator()
        section: Optional[str] = None

        def close_entity(finished) -> None:
            if finished is not None:
                name, description = finished
                entities.append(Entity(name=name, description=description))

        for line in self._scan(content):
            if line.kind is LineKind.SECTION:
                close_entity(entity.flush())
                section = line.section_key
            elif line.kind is LineKind.SUBITEM:
                if section == ENTITIES_SECTION:
                    close_entity(entity.start(line.text))
            elif line.kind is LineKind.LIST_ITEM:
                if section == RELATIONSHIPS_SECTION:
                    relationships.append(line.text)
                elif section == ENTITIES_SECTION and entity.is_open:
                    entity.add(line.text)
            elif line.kind is LineKind.PROSE:
                if section == ENTITIES_SECTION and entity.is_open:
                    entity.add(line.text)

        close_entity(entity.flush())

        logger.debug(f"Extracted {len(entities)} entities, {len(relationships)} relationships")
        return DataModel(entities=entities, relationships=relationships)
