# ui_lib/workflows/evaluate.py
from __future__ import annotations

from typing import TYPE_CHECKING
from schemas.models import ParsedPolicyResponse
from ui_lib.clients import policy as policy_client
from ui_lib.parsing import parse_policy_response

if TYPE_CHECKING:
    from streamlit.runtime.uploaded_file_manager import UploadedFile

__all__ = ["evaluate_claim"]


def evaluate_claim(uploaded: UploadedFile | None, query: str) -> ParsedPolicyResponse:
    """
    1) check the form inputs
    2) POST file + query to the policy service
    3) normalize whatever came back into a PolicyResponse
    """
    if uploaded is None:
        raise ValueError("File is required.")
    if not (query or "").strip():
        raise ValueError("Query is required.")

    raw = policy_client.submit_query(
        filename=uploaded.name,
        content=uploaded.getvalue(),
        content_type=getattr(uploaded, "type", None),
        query=query,
    )
    return parse_policy_response(raw)
