import json
import re
from typing import Any, List, Mapping, Optional

from schemas.models import DEFAULT_JUSTIFICATION, PolicyResponse
from .coerce import stringify, to_number

__all__ = ["best_effort_extract"]

_JUSTIFICATION_RE = re.compile(r'"justification"\s*:\s*"([\s\S]*?)"')
_AMOUNT_RE = re.compile(r'"amount"\s*:\s*(-?\d+(?:\.\d+)?)', re.ASCII)
_DECISION_RE = re.compile(r'"decision"\s*:\s*"(approved|rejected)"', re.IGNORECASE)


def _find_in_obj(obj: Mapping[str, Any], key: str) -> str:
    """Value of the first field whose name contains ``key`` (any case)."""
    for k, v in obj.items():
        if key in str(k).lower():
            return stringify(v)
    return ""


def _candidates(raw: Any) -> List[str]:
    if isinstance(raw, list):
        return [v for v in raw if isinstance(v, str)]
    if not isinstance(raw, Mapping):
        return []
    top = raw.get("result")
    out = [top] if isinstance(top, str) else []
    out += [v for k, v in raw.items() if k != "result" and isinstance(v, str)]
    return out


def best_effort_extract(raw: Any) -> PolicyResponse:
    """Scrape decision/amount/justification from whatever strings the payload has.

    Never fails: anything not found falls back to a rejected, zero-amount
    record. Justification and decision keep the first value found, amount
    keeps the last one.
    """
    justification = ""
    amount = 0.0
    decision: Optional[str] = None

    for text in _candidates(raw):
        try:
            parsed = json.loads(text)
        except (RecursionError, ValueError):
            parsed = None
            m = _JUSTIFICATION_RE.search(text)
            if m and not justification:
                justification = m.group(1).replace("\\n", "\n").replace('\\"', '"')
            m = _AMOUNT_RE.search(text)
            num = to_number(m.group(1)) if m else None
            if num is not None:
                amount = num
            m = _DECISION_RE.search(text)
            if m and decision is None:
                decision = m.group(1).lower()

        if isinstance(parsed, Mapping):
            justification = justification or _find_in_obj(parsed, "justification")
            amt = _find_in_obj(parsed, "amount")
            if amt:
                num = to_number(amt)
                if num is not None:
                    amount = num
            dec = _find_in_obj(parsed, "decision").lower()
            if dec in ("approved", "rejected") and decision is None:
                decision = dec

        if justification and amount != 0:
            break

    return PolicyResponse(
        name="",
        age="",
        sex="M",
        decision=decision or "rejected",
        amount=amount,
        justification=justification or DEFAULT_JUSTIFICATION,
    )
