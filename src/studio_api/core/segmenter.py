"""Sentence-aligned segmentation of long texts for size-limited model calls."""

import re
from typing import List

from ..errors import InvalidArgument

# A unit runs up to and including its terminal punctuation plus any trailing
# whitespace; text after the last terminator forms its own unit.
SENTENCE_UNIT_PATTERN = re.compile(r"[^.!?]*[.!?]+\s*|[^.!?]+")


def split_sentence_units(text: str) -> List[str]:
    """Split text into sentence units whose concatenation is exactly ``text``."""
    return SENTENCE_UNIT_PATTERN.findall(text)


def segment_text(text: str, limit: int) -> List[str]:
    """
    Split text into segments of at most ``limit`` characters along sentence boundaries.

    Sentence units are packed greedily. A unit longer than ``limit`` is never
    cut and becomes a segment of its own.

    Args:
        text: Text to split
        limit: Maximum segment length in characters

    Returns:
        Ordered list of segments whose concatenation equals ``text``

    Raises:
        InvalidArgument: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidArgument(f"limit must be a positive integer, got {limit!r}")

    if len(text) <= limit:
        return [text]

    units = split_sentence_units(text)
    segments: List[str] = []
    buffer = ""

    for unit in units:
        if buffer and len(buffer) + len(unit) > limit:
            segments.append(buffer)
            buffer = unit
        else:
            buffer += unit

    if buffer:
        segments.append(buffer)

    return segments if segments else [text]
