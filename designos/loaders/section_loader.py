"""
Section Loader - Discover product sections and load their contents.

Each section lives in ``product/sections/<id>/`` with an optional
``spec.md``, ``data.json``, ``designs/`` and ``screenshots/``. Only the
immediate children of each directory are considered.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import LoaderError, ProductFileNotFoundError
from .extractors.section_spec_extractor import SectionSpecExtractor
from .file_reader import list_directory, read_json_file, read_text_file
from .models import ParsedSpec, ScreenDesignInfo, ScreenshotInfo, SectionData
from ..core.config import AppConfig
from ..utils.id_generator import file_stem
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _extension(path: Path) -> str:
    return path.suffix.lower().lstrip(".")


class SectionLoader:
    """
    Loader for product sections.

    ``load_section_data`` never raises: missing or malformed pieces become
    None or empty lists.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        project_root: Optional[Path | str] = None,
    ):
        self.config = config or AppConfig()
        self.project_root = Path(project_root) if project_root is not None else self.config.paths.project_root
        self._spec_extractor = SectionSpecExtractor()

    @property
    def sections_root(self) -> Path:
        paths = self.config.paths
        return self.project_root / paths.product_dir / paths.sections_dir

    def section_path(self, section_id: str) -> Path:
        return self.sections_root / section_id

    def get_all_section_ids(self) -> List[str]:
        """
        Discover section ids.

        Returns:
            Names of the immediate subdirectories of the sections root,
            sorted lexically; empty if the root is missing
        """
        return [
            child.name for child in list_directory(self.sections_root)
            if child.is_dir()
        ]

    def has_section(self, section_id: str) -> bool:
        """True only for ids returned by ``get_all_section_ids``."""
        return section_id in self.get_all_section_ids()

    def has_section_spec(self, section_id: str) -> bool:
        spec_path = self.section_path(section_id) / self.config.paths.section_spec_file
        return self.has_section(section_id) and spec_path.is_file()

    def load_section_data(self, section_id: str) -> SectionData:
        """
        Load everything known about one section.

        Args:
            section_id: Section directory name

        Returns:
            SectionData; absent pieces are None or empty
        """
        if not self.has_section(section_id):
            logger.debug(f"No section '{section_id}' under {self.sections_root}")
            return SectionData(section_id=section_id)

        section_path = self.section_path(section_id)
        logger.debug(f"Loading section '{section_id}' from {section_path}")

        spec = self._load_spec(section_path)
        spec_parsed = self._parse_spec(spec, section_path)

        return SectionData(
            section_id=section_id,
            spec=spec,
            spec_parsed=spec_parsed,
            data=self._load_data(section_path),
            screen_designs=self._load_screen_designs(section_path),
            screenshots=self._load_screenshots(section_path),
        )

    def load_all_sections(self) -> List[SectionData]:
        """Load every discovered section, in section id order."""
        return [self.load_section_data(section_id) for section_id in self.get_all_section_ids()]

    def _load_spec(self, section_path: Path) -> Optional[str]:
        spec_path = section_path / self.config.paths.section_spec_file
        try:
            return read_text_file(spec_path)
        except ProductFileNotFoundError:
            return None
        except LoaderError as e:
            logger.warning(f"Could not read section spec: {e}")
            return None

    def _parse_spec(self, spec: Optional[str], section_path: Path) -> Optional[ParsedSpec]:
        if spec is None:
            return None
        source = str(section_path / self.config.paths.section_spec_file)
        return self._spec_extractor.extract(spec, source=source)

    def _load_data(self, section_path: Path) -> Optional[Dict[str, Any]]:
        data_path = section_path / self.config.paths.section_data_file
        try:
            data = read_json_file(data_path)
        except ProductFileNotFoundError:
            return None
        except LoaderError as e:
            logger.warning(f"Could not load section data: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Section data is not a JSON object: {data_path}")
            return None
        return data

    def _load_screen_designs(self, section_path: Path) -> List[ScreenDesignInfo]:
        designs_path = section_path / self.config.paths.section_designs_dir
        allowed = self.config.sections.design_extensions
        component_extensions = self.config.sections.component_extensions

        designs = []
        for child in list_directory(designs_path):
            extension = _extension(child)
            if not child.is_file() or extension not in allowed:
                continue

            name = file_stem(child.name)
            designs.append(ScreenDesignInfo(
                name=name,
                path=str(child),
                component_name=name if extension in component_extensions else "",
            ))

        return designs

    def _load_screenshots(self, section_path: Path) -> List[ScreenshotInfo]:
        screenshots_path = section_path / self.config.paths.section_screenshots_dir
        allowed = self.config.sections.screenshot_extensions

        screenshots = []
        for child in list_directory(screenshots_path):
            if not child.is_file() or _extension(child) not in allowed:
                continue

            screenshots.append(ScreenshotInfo(
                name=file_stem(child.name),
                path=str(child),
                url=child.resolve().as_uri(),
            ))

        return screenshots
