import io
import json
from unittest import mock

import pytest

from ui_lib.workflows.evaluate import evaluate_claim


class FakeUpload(io.BytesIO):
    def __init__(self, data: bytes, name: str, type: str):
        super().__init__(data)
        self.name = name
        self.type = type


def test_file_is_required():
    with pytest.raises(ValueError, match="File is required."):
        evaluate_claim(None, "is it covered?")


@pytest.mark.parametrize("query", ["", "   ", None])
def test_query_is_required(query):
    with pytest.raises(ValueError, match="Query is required."):
        evaluate_claim(FakeUpload(b"x", "a.txt", "text/plain"), query)


def test_submits_and_normalizes():
    record = {"decision": "approved", "amount": 2500, "justification": "Covered."}
    raw = {"success": True, "result": json.dumps(record).replace('"', "'")}
    with mock.patch("ui_lib.workflows.evaluate.policy_client.submit_query", return_value=raw) as submit:
        parsed = evaluate_claim(FakeUpload(b"%PDF", "claim.pdf", "application/pdf"), "Is surgery covered?")
    submit.assert_called_once_with(
        filename="claim.pdf",
        content=b"%PDF",
        content_type="application/pdf",
        query="Is surgery covered?",
    )
    assert parsed.source == "strict"
    assert parsed.record.amount == 2500
