import json
import math
import re
from typing import Any, Mapping, Optional

from schemas.models import PolicyResponse

__all__ = ["coerce_policy", "stringify", "to_number"]

# what Number() in the browser takes as decimal; float() is looser (1_000, non-ASCII digits)
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def stringify(value: Any) -> str:
    """Text form of a JSON value, rendered the way the browser client did."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def to_number(value: Any) -> Optional[float]:
    """Finite float for a JSON number or numeric string, else None.

    Blank strings count as 0, same as Number("") in the browser.
    """
    if value is None:
        return None
    try:
        if isinstance(value, (int, float)):
            num = float(value)
        else:
            text = stringify(value).strip()
            if not text:
                return 0.0
            if not _DECIMAL_RE.fullmatch(text):
                return None
            num = float(text)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return num


def coerce_policy(obj: Mapping[str, Any]) -> Optional[PolicyResponse]:
    """Validate one candidate object. None unless decision, amount and
    justification are all usable; name/age/sex always get a default."""
    if not isinstance(obj, Mapping):
        return None

    decision_raw = obj.get("decision")
    decision = decision_raw.lower() if isinstance(decision_raw, str) else ""
    if decision not in ("approved", "rejected"):
        return None

    amount = to_number(obj.get("amount"))
    if amount is None:
        return None

    justification = stringify(obj.get("justification"))
    if not justification:
        return None

    sex_raw = obj.get("sex")
    sex = sex_raw.upper() if isinstance(sex_raw, str) else ""
    if sex not in ("M", "F"):
        sex = "M"

    return PolicyResponse(
        name=stringify(obj.get("name")),
        age=stringify(obj.get("age")),
        sex=sex,
        decision=decision,
        amount=amount,
        justification=justification,
    )
