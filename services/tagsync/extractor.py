"""
Front matter tag extraction

Reads the `tags` field of a note's YAML front matter block.
"""

import logging
from typing import List

import yaml
from frontmatter.default_handlers import YAMLHandler

from .errors import ParseError

logger = logging.getLogger(__name__)

_handler = YAMLHandler()


def extract_tags(text: str) -> List[str]:
    """
    Extract the tag list from a note's front matter.

    Args:
        text: Full contents of the note

    Returns:
        Tags in the order they appear. A header without `tags` gives [].

    Raises:
        ParseError: No front matter block, or one that does not decode
    """
    text = text.strip()
    if not _handler.detect(text):
        raise ParseError("No front matter block")

    try:
        raw, _ = _handler.split(text)
    except ValueError as e:
        raise ParseError("Unterminated front matter block") from e

    try:
        metadata = _handler.load(raw)
    except yaml.YAMLError as e:
        raise ParseError(f"Front matter is not valid YAML: {e}") from e

    if metadata is None:
        return []
    if not isinstance(metadata, dict):
        raise ParseError(f"Front matter is a {type(metadata).__name__}, expected a mapping")

    tags = _normalize_tags(metadata.get("tags"))
    for tag in tags:
        # A line break would split the point across two line protocol lines
        if "\n" in tag or "\r" in tag:
            raise ParseError(f"Tag contains a line break: {tag!r}")
    return tags


def _normalize_tags(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    if isinstance(value, list):
        # `- #tag` unquoted is a YAML comment and loads as None
        return [str(t) for t in value if t is not None]
    raise ParseError(f"Unsupported tags value of type {type(value).__name__}")
