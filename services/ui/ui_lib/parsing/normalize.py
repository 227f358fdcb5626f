"""Strict path: find a fully valid PolicyResponse somewhere in the payload.

Upstream wraps the real answer in a ``result`` field, sometimes twice, and
sometimes as a string holding JSON (or something JSON-like). The search below
looks at a fixed set of places, never deeper than two ``result`` levels.
"""
from typing import Any, List, Mapping, Optional

from schemas.models import PolicyResponse
from .coerce import coerce_policy
from .json_parse import parse_json_lenient

__all__ = ["normalize_api_response", "fallback_extract"]


def _decode_object(text: str) -> Optional[Mapping[str, Any]]:
    parsed = parse_json_lenient(text)
    return parsed if isinstance(parsed, Mapping) else None


def _coerce_inner_result(obj: Mapping[str, Any]) -> Optional[PolicyResponse]:
    """One more level: obj["result"] as an object or as an encoded string."""
    inner = obj.get("result")
    if isinstance(inner, Mapping):
        return coerce_policy(inner)
    if isinstance(inner, str):
        inner_obj = _decode_object(inner)
        if inner_obj is not None:
            return coerce_policy(inner_obj)
    return None


def _values(obj: Any) -> List[Any]:
    """Field values of an object, elements of an array, nothing otherwise."""
    if isinstance(obj, Mapping):
        return list(obj.values())
    if isinstance(obj, list):
        return obj
    return []


def fallback_extract(obj: Any) -> Optional[PolicyResponse]:
    """Flat scan of obj's values (or elements); first one that coerces wins."""
    for value in _values(obj):
        if isinstance(value, str):
            parsed = _decode_object(value)
            if parsed is None:
                continue
            found = coerce_policy(parsed) or _coerce_inner_result(parsed)
            if found:
                return found
        elif isinstance(value, Mapping):
            found = coerce_policy(value)
            if found:
                return found
    return None


def normalize_api_response(raw: Any) -> Optional[PolicyResponse]:
    if isinstance(raw, list):
        # a bare array has no "result"; its elements are the only candidates
        return fallback_extract(raw)
    if not isinstance(raw, Mapping):
        return None

    # 1) the payload already has the expected shape
    direct = coerce_policy(raw)
    if direct:
        return direct

    # 2) wrapped in "result", e.g.
    #    {"success": true, "result": "{'jobId': '..', 'result': '{\\n \"name\": ..}'}"}
    top = raw.get("result")
    if isinstance(top, str):
        outer = _decode_object(top)
        if outer is not None:
            found = (
                coerce_policy(outer)
                or _coerce_inner_result(outer)
                or fallback_extract(outer)
            )
            if found:
                return found
    elif isinstance(top, list):
        found = fallback_extract(top)
        if found:
            return found
    elif isinstance(top, Mapping):
        found = coerce_policy(top) or fallback_extract(top)
        if found:
            return found

    # 3) last chance: any field of the payload itself
    return fallback_extract(raw)
