"""Token-skin memo formatting.

Turns an arbitrary list of segments (text, colors, enum members, mappings,
nested iterables) into a single ``token-skin:<v1>:<v2>:...`` string for a
memo instruction. Separator characters inside values are not escaped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from skinmemo.colors import Color

logger = logging.getLogger(__name__)

MEMO_PREFIX = "token-skin"
SEGMENT_SEPARATOR = ":"
KEY_VALUE_SEPARATOR = "="

_EXHAUSTED = object()


def format_token_skin_memo(*segments: Any) -> str:
    """Build the memo for a token skin selection.

    Returns "" when there are no segments or none of them yields a value.
    """
    if not segments:
        return ""

    values = flatten_segments(*segments)
    if not values:
        logger.debug("No usable segments in %d input(s)", len(segments))
        return ""

    return MEMO_PREFIX + SEGMENT_SEPARATOR + SEGMENT_SEPARATOR.join(values)


def flatten_segments(*segments: Any) -> list[str]:
    """Flatten segments into the ordered value list the memo is joined from.

    Nested iterables are walked with an explicit stack of iterators, so
    nesting depth is not bounded by the interpreter's recursion limit.
    Containers currently being walked are tracked by id; re-entering one
    is skipped.
    """
    values: list[str] = []
    active: set[int] = set()
    stack: list[tuple[int | None, Iterator[Any]]] = [(None, iter(segments))]
    while stack:
        marker, items = stack[-1]
        item = next(items, _EXHAUSTED)
        if item is _EXHAUSTED:
            stack.pop()
            if marker is not None:
                active.discard(marker)
            continue

        nested = _append_segment(values, item)
        if nested is None:
            continue
        marker = id(nested)
        if marker in active:
            logger.debug("Skipping self-referencing %s segment", type(nested).__name__)
            continue
        active.add(marker)
        stack.append((marker, iter(nested)))
    return values


def _append_segment(values: list[str], segment: Any) -> Iterable[Any] | None:
    """Append what a single segment contributes.

    Returns the segment itself when it is an iterable whose elements still
    have to be flattened.
    """
    if segment is None:
        return None

    # Enum before str: StrEnum members are str instances but render by name.
    if isinstance(segment, Enum):
        values.append(segment.name)
    elif isinstance(segment, str):
        text = segment.strip()
        if text:
            values.append(text)
    elif isinstance(segment, Color):
        values.append(segment.to_hex())
    elif isinstance(segment, Mapping):
        for key, value in segment.items():
            key_text = _format_value(key).strip()
            if not key_text:
                continue
            values.append(key_text + KEY_VALUE_SEPARATOR + _format_value(value))
    elif isinstance(segment, Iterable):
        return segment
    else:
        values.append(_to_text(segment))
    return None


def _format_value(value: Any) -> str:
    """Render a single mapping key or value. Nested collections are not flattened."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, Color):
        return value.to_hex()
    return _to_text(value)


def _to_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        logger.debug("str() failed for %s, using default repr", type(value).__name__)
        return object.__repr__(value)
