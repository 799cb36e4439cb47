"""
Design Tokens Extractor - Extract color and typography tokens from JSON.

Each token file is a flat JSON object with three required string keys.
A file missing any key yields no record at all, never a partial one.
"""

from typing import Any, Dict, Optional, Tuple

from .base import BaseExtractor
from ..errors import ParsingError
from ..file_reader import decode_json
from ..models import ColorTokens, TypographyTokens


class DesignTokensExtractor(BaseExtractor):
    """
    Base extractor for a flat JSON token file.

    Subclasses set ``required_keys`` and ``record_type``; the record is
    built from exactly those keys.
    """

    required_keys: Tuple[str, ...] = ()
    record_type: type = dict

    @property
    def component_name(self) -> str:
        return "design_tokens"

    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> Any:
        """
        Extract a token record.

        Args:
            content: Raw JSON text
            source: Optional source path for error messages

        Returns:
            Record of ``record_type``

        Raises:
            InvalidJSONError: If content is not valid JSON
            ParsingError: If the root is not an object, or a required key is
                missing or not a string
        """
        data = decode_json(content, source=source)

        if not isinstance(data, dict):
            raise ParsingError(
                f"Expected a JSON object, got {type(data).__name__}",
                path=source,
            )

        values = self._required_values(data, source)
        return self.record_type(**values)

    def _required_values(self, data: Dict[str, Any], source: Optional[str]) -> Dict[str, str]:
        missing = [
            key for key in self.required_keys
            if not isinstance(data.get(key), str)
        ]
        if missing:
            raise ParsingError(
                f"Missing required {self.component_name} fields "
                f"({', '.join(self.required_keys)}): {', '.join(missing)}",
                path=source,
            )
        return {key: data[key] for key in self.required_keys}


class ColorTokensExtractor(DesignTokensExtractor):
    """Extractor for colors.json."""

    required_keys = ("primary", "secondary", "neutral")
    record_type = ColorTokens

    @property
    def component_name(self) -> str:
        return "color"


class TypographyTokensExtractor(DesignTokensExtractor):
    """Extractor for typography.json."""

    required_keys = ("heading", "body", "mono")
    record_type = TypographyTokens

    @property
    def component_name(self) -> str:
        return "typography"
