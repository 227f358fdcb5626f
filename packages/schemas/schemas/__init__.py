from .models import (
    DEFAULT_JUSTIFICATION,
    Decision,
    ParsedPolicyResponse,
    PolicyResponse,
    ResponseSource,
    Sex,
)

__all__ = [
    "DEFAULT_JUSTIFICATION",
    "Decision",
    "ParsedPolicyResponse",
    "PolicyResponse",
    "ResponseSource",
    "Sex",
]
