"""
Participant codec — JSON text in the database, list[str] everywhere else.

The projects table stores participants in a single text column as a JSON
array. Encoding is deterministic and lossless for any list of strings,
including the empty list, which encodes to "[]" (never to NULL).

Decoding is TOLERANT on purpose: historical rows may hold NULL, an empty
string, text that is not valid JSON, or an array with non-string items.
All of those read back as an empty list instead of failing the whole
listing. Do not tighten this into an error: clients rely on the list
endpoint surviving bad legacy rows.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


def encode_participants(names: Sequence[str]) -> str:
    """Serialize names to JSON array text, keeping order and duplicates."""
    return json.dumps(list(names), ensure_ascii=False)


def decode_participants(value: Any) -> list[str]:
    """
    Turn a stored participants value back into a list. Never raises.

    None / ""           → []
    list of str         → returned as-is
    malformed text      → []
    JSON but not a list → []
    non-str items       → []
    """
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value if _all_names(value) else []

    try:
        parsed = json.loads(value)
    except (TypeError, ValueError):
        logger.debug("Discarding malformed participants value: %r", value)
        return []

    if not isinstance(parsed, list):
        logger.debug("Discarding non-list participants value: %r", value)
        return []
    if not _all_names(parsed):
        logger.debug("Discarding participants with non-string items: %r", value)
        return []
    return parsed


def _all_names(items: list[Any]) -> bool:
    return all(isinstance(item, str) for item in items)
