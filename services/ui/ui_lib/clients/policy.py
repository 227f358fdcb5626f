import logging
import requests
from ui_lib.config import POLICY_API_URL, HTTP_TIMEOUT_S

logger = logging.getLogger("policy_checker.client")


class PolicyServiceError(RuntimeError):
    """The policy service answered, but not with a usable JSON body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def submit_query(filename: str, content: bytes, content_type: str | None, query: str):
    """POST the document + query as multipart; returns the decoded JSON body as-is."""
    files = {"file": (filename, content, content_type or "application/octet-stream")}
    r = requests.post(POLICY_API_URL, data={"query": query}, files=files, timeout=HTTP_TIMEOUT_S)
    if not r.ok:
        logger.info("Policy service error", extra={"status_code": r.status_code})
        raise PolicyServiceError(r.text or f"Request failed with {r.status_code}", r.status_code)
    try:
        return r.json()
    except ValueError as ex:
        raise PolicyServiceError(f"Malformed JSON response from policy service: {ex}", r.status_code) from ex
