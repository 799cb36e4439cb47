"""
Product Loader - Main orchestrator for loading a product definition.

Reads the markdown and JSON files under ``product/`` through the
extractors and assembles them into a ProductData record. Individual
``load_*`` methods raise LoaderError subclasses; ``load_product_data``
swallows them and leaves the matching field empty.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, TypeVar

from .errors import LoaderError, ParsingError, ProductFileNotFoundError
from .extractors.base import BaseExtractor
from .extractors.overview_extractor import OverviewExtractor
from .extractors.roadmap_extractor import RoadmapExtractor
from .extractors.data_model_extractor import DataModelExtractor
from .extractors.shell_extractor import ShellExtractor
from .extractors.design_tokens_extractor import (
    ColorTokensExtractor,
    TypographyTokensExtractor,
)
from .models import (
    DataModel,
    DesignPhase,
    DesignSystem,
    PhaseStatus,
    ProductData,
    ProductOverview,
    ProductRoadmap,
    ShellInfo,
)
from .file_reader import read_text_file
from .section_loader import SectionLoader
from ..core.config import AppConfig
from ..utils.logger import get_logger, LogContext

logger = get_logger(__name__)

T = TypeVar("T")


class ProductLoader:
    """
    Loader for the product-level files.

    Loads, in order:
    1. Product overview (product-overview.md)
    2. Product roadmap (product-roadmap.md)
    3. Data model (data-model/data-model.md)
    4. Design system (design-system/colors.json, typography.json)
    5. Shell (shell/spec.md, shell/components/)

    Every load is a single synchronous pass; nothing is cached, so loading
    the same unchanged files twice yields equal records.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        project_root: Optional[Path | str] = None,
    ):
        """
        Initialize the loader.

        Args:
            config: Application configuration
            project_root: Overrides ``config.paths.project_root``
        """
        self.config = config or AppConfig()
        self.project_root = Path(project_root) if project_root is not None else self.config.paths.project_root
        self._extractors: Dict[str, BaseExtractor] = {}

        self._init_extractors()

    def _init_extractors(self) -> None:
        """Initialize all extractors."""
        self._extractors = {
            'overview': OverviewExtractor(),
            'roadmap': RoadmapExtractor(),
            'data_model': DataModelExtractor(),
            'shell': ShellExtractor(),
            'colors': ColorTokensExtractor(),
            'typography': TypographyTokensExtractor(),
        }

    @property
    def product_root(self) -> Path:
        """Directory holding all product artifacts."""
        return self.project_root / self.config.paths.product_dir

    @property
    def section_loader(self) -> SectionLoader:
        return SectionLoader(config=self.config, project_root=self.project_root)

    def _path(self, relative: str) -> Path:
        return self.product_root / relative

    def _extract_file(self, key: str, relative: str):
        path = self._path(relative)
        content = read_text_file(path)
        return self._extractors[key].extract(content, source=str(path))

    # Product files

    def load_product_overview(self) -> ProductOverview:
        """
        Load product-overview.md.

        Raises:
            ProductFileNotFoundError: If the file is missing
            ParsingError: If the document has no title
        """
        return self._extract_file('overview', self.config.paths.overview_file)

    def load_product_roadmap(self) -> ProductRoadmap:
        """
        Load product-roadmap.md.

        Raises:
            ProductFileNotFoundError: If the file is missing
        """
        return self._extract_file('roadmap', self.config.paths.roadmap_file)

    def load_data_model(self) -> DataModel:
        """
        Load data-model/data-model.md.

        Raises:
            ProductFileNotFoundError: If the file is missing
        """
        return self._extract_file('data_model', self.config.paths.data_model_file)

    def load_design_system(self) -> DesignSystem:
        """
        Load the design tokens.

        Colors and typography load independently: a missing or malformed
        file leaves its field as None without affecting the other.

        Raises:
            ProductFileNotFoundError: If neither token file exists
            ParsingError: If token files exist but none of them is valid
        """
        paths = self.config.paths
        colors_path = self._path(paths.colors_file)
        typography_path = self._path(paths.typography_file)

        if not colors_path.is_file() and not typography_path.is_file():
            raise ProductFileNotFoundError(colors_path.parent, reason="No design token files")

        colors = self._load_optional_tokens('colors', paths.colors_file)
        typography = self._load_optional_tokens('typography', paths.typography_file)

        if colors is None and typography is None:
            raise ParsingError("No valid design token files", path=colors_path.parent)

        return DesignSystem(colors=colors, typography=typography)

    def _load_optional_tokens(self, key: str, relative: str):
        try:
            return self._extract_file(key, relative)
        except ProductFileNotFoundError:
            logger.debug(f"No {key} tokens at {self._path(relative)}")
        except LoaderError as e:
            logger.warning(f"Skipping {key} tokens: {e}")
        return None

    def load_shell_info(self) -> ShellInfo:
        """
        Load the shell spec and detect shell components.

        Raises:
            ProductFileNotFoundError: If neither shell/spec.md nor
                shell/components/ exists
        """
        paths = self.config.paths
        has_components = self._path(paths.shell_components_dir).is_dir()

        spec = None
        if self.has_shell_spec():
            spec = self._extract_file('shell', paths.shell_spec_file)
        elif not has_components:
            raise ProductFileNotFoundError(self._path(paths.shell_spec_file))

        return ShellInfo(spec=spec, has_components=has_components)

    # Presence checks

    def has_product_overview(self) -> bool:
        return self._path(self.config.paths.overview_file).is_file()

    def has_product_roadmap(self) -> bool:
        return self._path(self.config.paths.roadmap_file).is_file()

    def has_data_model(self) -> bool:
        return self._path(self.config.paths.data_model_file).is_file()

    def has_design_system(self) -> bool:
        paths = self.config.paths
        return (
            self._path(paths.colors_file).is_file()
            or self._path(paths.typography_file).is_file()
        )

    def has_shell_spec(self) -> bool:
        return self._path(self.config.paths.shell_spec_file).is_file()

    # Aggregation

    def load_product_data(self) -> ProductData:
        """
        Load every product artifact.

        Never raises for loader-level failures: each failing piece is
        logged and left as None.

        Returns:
            ProductData with whatever could be loaded
        """
        with LogContext(logger, "Loading product data", root=self.product_root):
            data = ProductData(
                overview=self._load_or_none("overview", self.load_product_overview),
                roadmap=self._load_or_none("roadmap", self.load_product_roadmap),
                data_model=self._load_or_none("data model", self.load_data_model),
                design_system=self._load_or_none("design system", self.load_design_system),
                shell=self._load_or_none("shell", self.load_shell_info),
            )

        logger.info(f"Loaded product data:\n{data.summary()}")
        return data

    def _load_or_none(self, label: str, load: Callable[[], T]) -> Optional[T]:
        try:
            return load()
        except ProductFileNotFoundError as e:
            logger.debug(f"No {label}: {e}")
        except LoaderError as e:
            logger.warning(f"Could not load {label}: {e}")
        return None

    def get_phase_status(self) -> List[PhaseStatus]:
        """
        Report which design phases have their artifacts in place.

        Returns:
            One PhaseStatus per DesignPhase, in phase order
        """
        sections = self.section_loader
        completed = {
            DesignPhase.PRODUCT: self.has_product_overview() and self.has_product_roadmap(),
            DesignPhase.DATA_MODEL: self.has_data_model(),
            DesignPhase.DESIGN: self.has_design_system(),
            DesignPhase.SECTIONS: any(
                sections.has_section_spec(section_id)
                for section_id in sections.get_all_section_ids()
            ),
            DesignPhase.SHELL: self.has_shell_spec(),
        }
        return [PhaseStatus(phase=phase, complete=completed[phase]) for phase in DesignPhase]
