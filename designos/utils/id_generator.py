"""
ID helpers for roadmap sections and screen designs.

Roadmap headings either carry an explicit ``{custom-id}`` marker or get an
id derived from the heading text.
"""

import re
from typing import Optional, Tuple


EXPLICIT_ID_PATTERN = re.compile(r'\{([^}]+)\}')


def heading_to_id(heading: str) -> str:
    """
    Derive a section id from heading text.

    Lowercases and replaces each space with a hyphen. Other characters are
    kept as written so ids stay predictable for hand-authored files.

    Args:
        heading: Heading text (without the ``##`` marker)

    Returns:
        Section id (e.g., "Task Management" -> "task-management")
    """
    return heading.strip().lower().replace(" ", "-")


def extract_explicit_id(heading: str) -> Optional[str]:
    """
    Return the ``{custom-id}`` marker from a heading, if present.

    Args:
        heading: Heading text

    Returns:
        The id inside the first pair of braces, or None
    """
    match = EXPLICIT_ID_PATTERN.search(heading)
    if match:
        return match.group(1)
    return None


def split_heading_id(heading: str) -> Tuple[str, str]:
    """
    Split a roadmap heading into ``(id, title)``.

    Examples:
        "Task Lists {tasks}" -> ("tasks", "Task Lists")
        "Task Lists"         -> ("task-lists", "Task Lists")

    Args:
        heading: Heading text (without the ``##`` marker)

    Returns:
        Tuple of section id and display title
    """
    heading = heading.strip()
    explicit_id = extract_explicit_id(heading)
    if explicit_id is not None:
        title = heading.replace(f"{{{explicit_id}}}", "").strip()
        return explicit_id, title
    return heading_to_id(heading), heading


def file_stem(filename: str) -> str:
    """
    Strip the final extension from a file name.

    Args:
        filename: File name such as "TaskList.swift"

    Returns:
        Name without extension ("TaskList")
    """
    stem, dot, _ = filename.rpartition(".")
    if not dot or not stem:
        return filename
    return stem
