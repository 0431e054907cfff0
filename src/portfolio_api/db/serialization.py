"""
Conversions at the storage edge.

List-valued fields are stored as JSON text and boolean flags as 0/1 integers.
Reading never raises: malformed stored text degrades to an empty list.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional
import json
import logging

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, e.g. ``2025-01-01T09:30:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def dump_list(value: Any) -> str:
    """
    Serialize a list-valued field for storage.

    None becomes ``"[]"``. Strings are assumed to be serialized already and are
    stored as given.
    """
    if value is None:
        return "[]"
    if isinstance(value, str):
        return value
    return json.dumps(list(value) if isinstance(value, tuple) else value)


def load_list(raw: Optional[str]) -> List[Any]:
    """Deserialize a stored list-valued field, falling back to ``[]``."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Discarding malformed list value: {raw[:80]!r}")
        return []
    if not isinstance(value, list):
        logger.warning(f"Expected a JSON list, got {type(value).__name__}")
        return []
    return value


def dump_text(value: Any) -> Optional[str]:
    """Store an opaque field (attendees, attachments) as text."""
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


def to_flag(value: Any) -> int:
    return 1 if value else 0


def from_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)
