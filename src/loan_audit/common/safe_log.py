"""Deal-text-safe logging -- drop-in replacement for print().

Loan agreements are confidential. Structured data passed to ``safe_log``
has its document text fields replaced by a length marker before it is
written, so provision text never reaches the logs.

Usage:
    from loan_audit.common.safe_log import safe_log
    safe_log("Normalizing payload", data=payload, clauses=3)
"""

import copy
import json
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Set

MAX_LOG_CHARS = 10240

# Field names carrying agreement text
_TEXT_FIELDS = {
    "rawText", "raw_text", "original_text",
    "extracted_text", "summary", "snapshot",
    "content", "text",
}


def _redact_text(value: Any) -> str:
    return f"<redacted {len(str(value))} chars>"


def _redact_by_field_name(data: Any, visited: Optional[Set[int]] = None) -> Any:
    """Walk structure and redact known document text field names."""
    if visited is None:
        visited = set()
    obj_id = id(data)
    if obj_id in visited:
        return data
    visited.add(obj_id)

    if isinstance(data, dict):
        result = {}
        for k, v in data.items():
            if k in _TEXT_FIELDS and isinstance(v, str):
                result[k] = _redact_text(v)
            else:
                result[k] = _redact_by_field_name(v, visited)
        return result
    elif isinstance(data, (list, tuple)):
        return [_redact_by_field_name(item, visited) for item in data]
    return data


def redact_text(data: Any) -> Any:
    """Deep-copy data and redact all document text fields."""
    if data is None:
        return None
    try:
        redacted = copy.deepcopy(data)
    except (TypeError, copy.Error):
        return {"__redacted__": "deep copy failed"}
    return _redact_by_field_name(redacted)


class _SafeEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, bytes):
            return "<bytes>"
        return super().default(obj)


def _dump(value: Any) -> str:
    return json.dumps(redact_text(value), cls=_SafeEncoder, default=str)


def safe_log(message: str, *args, data: Any = None, **kwargs) -> None:
    """Text-safe logging function."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    parts = [f"[{timestamp}]", message]

    for arg in args:
        if isinstance(arg, (dict, list)):
            parts.append(_dump(arg))
        else:
            parts.append(str(arg))

    for k, v in kwargs.items():
        if isinstance(v, (dict, list)):
            parts.append(f"{k}={_dump(v)}")
        else:
            parts.append(f"{k}={v}")

    if data is not None:
        try:
            data_str = _dump(data)
            if len(data_str) > MAX_LOG_CHARS:
                data_str = data_str[:MAX_LOG_CHARS] + "... [TRUNCATED]"
            parts.append(data_str)
        except (TypeError, ValueError):
            parts.append(str(redact_text(data))[:MAX_LOG_CHARS])

    print(" ".join(parts), flush=True)
