import json
import logging
from typing import Any

from schemas.models import ParsedPolicyResponse
from .best_effort import best_effort_extract
from .normalize import normalize_api_response

__all__ = ["parse_policy_response", "normalize_api_response", "best_effort_extract"]

logger = logging.getLogger("policy_checker.parsing")


def _truncate(s: str, n: int = 1000) -> str:
    return s if len(s) <= n else s[:n] + f"... [truncated {len(s)-n} chars]"


def _preview(raw: Any) -> str:
    try:
        return _truncate(json.dumps(raw, ensure_ascii=False, default=str))
    except (TypeError, ValueError):
        return _truncate(repr(raw))


def parse_policy_response(raw: Any) -> ParsedPolicyResponse:
    """Turn whatever the policy service returned into a PolicyResponse.

    Always returns a record; ``source`` tells whether it was validated
    ("strict") or scraped together with defaults ("best_effort").
    """
    record = normalize_api_response(raw)
    if record is not None:
        logger.debug("Policy response parsed", extra={"source": "strict"})
        return ParsedPolicyResponse(record=record, source="strict")

    logger.warning(
        "PolicyChecker: Unable to parse response",
        extra={"raw_preview": _preview(raw)},
    )
    record = best_effort_extract(raw)
    logger.debug(
        "Policy response scraped",
        extra={"source": "best_effort", "decision": record.decision, "amount": record.amount},
    )
    return ParsedPolicyResponse(record=record, source="best_effort")
