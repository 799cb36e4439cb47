"""
Configuration management for the DesignOS product loader.

Settings are plain dataclasses grouped by concern. They are read from YAML,
and environment variables provide the defaults for the project root and the
config file location.
"""

from dataclasses import asdict, dataclass, field
from typing import Optional, List, Dict, Any
from pathlib import Path
import os
import yaml


DEFAULT_DESIGN_EXTENSIONS = ["swift", "json"]
DEFAULT_COMPONENT_EXTENSIONS = ["swift"]
DEFAULT_SCREENSHOT_EXTENSIONS = ["png", "jpg", "jpeg", "gif", "webp", "tiff"]


def _normalize_extensions(extensions: List[str]) -> List[str]:
    """Lowercase extensions and drop any leading dot."""
    return [ext.lower().lstrip(".") for ext in extensions]


@dataclass
class PathsConfig:
    """
    Locations of product artifacts.

    All file names are relative to ``project_root / product_dir``.
    """
    project_root: Path = field(default_factory=lambda: Path(
        os.getenv("DESIGNOS_PROJECT_ROOT", ".")
    ))
    product_dir: str = "product"

    overview_file: str = "product-overview.md"
    roadmap_file: str = "product-roadmap.md"
    data_model_file: str = "data-model/data-model.md"
    colors_file: str = "design-system/colors.json"
    typography_file: str = "design-system/typography.json"
    shell_spec_file: str = "shell/spec.md"
    shell_components_dir: str = "shell/components"
    sections_dir: str = "sections"

    # Per-section layout (relative to sections/<id>)
    section_spec_file: str = "spec.md"
    section_data_file: str = "data.json"
    section_designs_dir: str = "designs"
    section_screenshots_dir: str = "screenshots"

    def __post_init__(self):
        if isinstance(self.project_root, str):
            self.project_root = Path(self.project_root)

    @property
    def product_root(self) -> Path:
        """Directory holding all product artifacts."""
        return self.project_root / self.product_dir


@dataclass
class SectionConfig:
    """File-type allow-lists used while enumerating section directories."""
    design_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_DESIGN_EXTENSIONS))
    component_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_COMPONENT_EXTENSIONS))
    screenshot_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_SCREENSHOT_EXTENSIONS))

    def __post_init__(self):
        self.design_extensions = _normalize_extensions(self.design_extensions)
        self.component_extensions = _normalize_extensions(self.component_extensions)
        self.screenshot_extensions = _normalize_extensions(self.screenshot_extensions)


@dataclass
class OutputConfig:
    """Configuration for JSON output formatting."""
    pretty_print: bool = True
    indent: int = 2
    sort_keys: bool = False
    ensure_ascii: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """Loader settings: where the product lives and how results are printed."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    sections: SectionConfig = field(default_factory=SectionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Build a config from nested mappings. Missing groups or keys keep their
        defaults; an empty group (``paths:`` with nothing under it) counts as
        missing.

        Raises:
            ValueError: If a group holds an unknown key
        """
        try:
            return cls(
                paths=PathsConfig(**(data.get('paths') or {})),
                sections=SectionConfig(**(data.get('sections') or {})),
                output=OutputConfig(**(data.get('output') or {})),
                logging=LoggingConfig(**(data.get('logging') or {})),
            )
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping suitable for YAML; paths are written as strings."""
        data = asdict(self)
        data['paths']['project_root'] = str(self.paths.project_root)
        if self.logging.file is not None:
            data['logging']['file'] = str(self.logging.file)
        return data

    def save_yaml(self, path: Path | str) -> None:
        """Write the config as YAML, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """Config built purely from defaults and the environment."""
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. DESIGNOS_CONFIG environment variable
    3. ./config/default.yaml, ./config.yaml, ~/.designos/config.yaml
    4. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    env_path = os.getenv("DESIGNOS_CONFIG")
    if env_path:
        return AppConfig.from_yaml(env_path)

    default_paths = [
        Path("config/default.yaml"),
        Path("config.yaml"),
        Path.home() / ".designos" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
