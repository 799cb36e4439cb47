"""
Base Extractor - Abstract base class for product file extractors.

All markdown extractors share one line scanner: each input line is
classified by its heading or list-item prefix, then the extractor folds
the classified lines into its record. Only ``#``, ``##``, ``###`` and
``- `` prefixes carry meaning; links, code blocks and tables are plain
prose.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple


class LineKind(Enum):
    """Classification of a single markdown line."""
    TITLE = "title"          # "# "
    SECTION = "section"      # "## "
    SUBITEM = "subitem"      # "### "
    LIST_ITEM = "list_item"  # "- "
    PROSE = "prose"
    BLANK = "blank"


# Checked in order; the prefixes are mutually exclusive.
_PREFIXES = (
    ("# ", LineKind.TITLE),
    ("## ", LineKind.SECTION),
    ("### ", LineKind.SUBITEM),
    ("- ", LineKind.LIST_ITEM),
)


@dataclass(frozen=True)
class ScannedLine:
    """A classified line with its marker removed and whitespace trimmed."""
    kind: LineKind
    text: str
    line_number: int

    @property
    def section_key(self) -> str:
        """Lowercased text, used to match section names."""
        return self.text.lower()


def classify_line(line: str) -> Tuple[LineKind, str]:
    """
    Classify one line of markdown.

    Args:
        line: Raw line without its line terminator

    Returns:
        Tuple of (kind, trimmed text without the marker)
    """
    for prefix, kind in _PREFIXES:
        if line.startswith(prefix):
            return kind, line[len(prefix):].strip()

    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK, ""
    return LineKind.PROSE, stripped


def scan_lines(content: str) -> Iterator[ScannedLine]:
    """
    Iterate over classified lines of ``content``.

    Blank lines are skipped; they separate paragraphs but never end a
    section or sub-item.

    Args:
        content: Raw markdown text

    Yields:
        ScannedLine for every non-blank line
    """
    for number, line in enumerate(content.splitlines(), start=1):
        kind, text = classify_line(line)
        if kind is LineKind.BLANK:
            continue
        yield ScannedLine(kind=kind, text=text, line_number=number)


def join_text(parts: List[str]) -> str:
    """Join accumulated text fragments with single spaces."""
    return " ".join(part for part in parts if part).strip()


class BaseExtractor(ABC):
    """
    Abstract base class for product file extractors.

    Each extractor turns the text of one kind of product file into its
    record. Extractors are stateless; one instance can parse any number
    of files.
    """

    @property
    @abstractmethod
    def component_name(self) -> str:
        """Name of the component this extractor handles."""
        pass

    @abstractmethod
    def extract(self, content: str, source: Optional[str] = None, **kwargs) -> Any:
        """
        Extract a record from file content.

        Args:
            content: Raw file text
            source: Optional source path, used in error messages
            **kwargs: Extractor-specific options

        Returns:
            Extracted record - type depends on implementation
        """
        pass

    def _scan(self, content: str) -> Iterator[ScannedLine]:
        return scan_lines(content)


class SubItemAccumulator:
    """
    Collects a level-3 sub-item and the text lines that follow it.

    ``start`` flushes whatever was open before; ``flush`` returns the
    finished ``(title, text)`` pair, or None if nothing was open.
    """

    def __init__(self):
        self.title: Optional[str] = None
        self.parts: List[str] = []

    @property
    def is_open(self) -> bool:
        return self.title is not None

    def start(self, title: str) -> Optional[Tuple[str, str]]:
        finished = self.flush()
        self.title = title
        return finished

    def add(self, text: str) -> None:
        self.parts.append(text)

    def flush(self) -> Optional[Tuple[str, str]]:
        if self.title is None:
            return None
        finished = (self.title, join_text(self.parts))
        self.title = None
        self.parts = []
        return finished
