"""
Normalization of heterogeneous backend replies.
"""

import json
from typing import Any

from edugraph.clients.http import ApiResult, TextResult


def to_json_string(value: Any) -> str:
    """Serialize compactly, the way a JS client would stringify."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def ai_result_text(result: ApiResult) -> str:
    """
    Collapse an AI service reply into a single string.

    Precedence: a string reply is used verbatim; an object with a truthy
    ``result`` field yields that field; anything else is serialized whole.
    """
    if isinstance(result, TextResult):
        return result.text

    value = result.value
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and value.get("result"):
        inner = value["result"]
        return inner if isinstance(inner, str) else to_json_string(inner)
    return to_json_string(value)


def delete_succeeded(result: ApiResult) -> bool:
    """
    Interpret a delete reply as a boolean.

    An object carrying ``success`` reports its truthiness, a string reply
    counts as success when non-empty, and anything else counts as success.
    """
    if isinstance(result, TextResult):
        return len(result.text) > 0

    value = result.value
    if isinstance(value, dict) and "success" in value:
        return bool(value["success"])
    if isinstance(value, str):
        return len(value) > 0
    return True
