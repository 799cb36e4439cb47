"""
File access helpers shared by the product and section loaders.
"""

import json
from pathlib import Path
from typing import Any, List

from .errors import InvalidJSONError, LoaderError, ProductFileNotFoundError


def read_text_file(path: Path) -> str:
    """
    Read a UTF-8 product file.

    A leading byte-order mark is dropped; line endings are kept as written.

    Args:
        path: File path

    Returns:
        File content

    Raises:
        ProductFileNotFoundError: If the file does not exist
        LoaderError: If the file exists but cannot be read or decoded
    """
    if not path.is_file():
        raise ProductFileNotFoundError(path)

    try:
        return path.read_bytes().decode('utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Unable to read file: {e}", path=path) from e


def decode_json(content: str, source: Any = None) -> Any:
    """
    Decode JSON text.

    Raises:
        InvalidJSONError: If the content is not valid JSON or nests too deeply
    """
    try:
        return json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        raise InvalidJSONError(str(e), path=source) from e


def read_json_file(path: Path) -> Any:
    """
    Read and decode a JSON file.

    Raises:
        ProductFileNotFoundError: If the file does not exist
        InvalidJSONError: If the content is not valid JSON
    """
    return decode_json(read_text_file(path), source=path)


def list_directory(path: Path) -> List[Path]:
    """
    List the immediate children of a directory, sorted by name.

    A missing directory (or a path that is not a directory) yields an
    empty list instead of an error.
    """
    if not path.is_dir():
        return []
    return sorted(path.iterdir(), key=lambda child: child.name)
