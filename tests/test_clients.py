from unittest import mock

import pytest

from ui_lib.clients import policy
from ui_lib.clients.policy import PolicyServiceError, submit_query


def _response(ok=True, status_code=200, text="", body=None, json_error=None):
    r = mock.Mock()
    r.ok = ok
    r.status_code = status_code
    r.text = text
    if json_error:
        r.json.side_effect = json_error
    else:
        r.json.return_value = body
    return r


def test_submit_query_posts_multipart():
    with mock.patch("ui_lib.clients.policy.requests.post", return_value=_response(body={"result": "x"})) as post:
        out = submit_query("bill.pdf", b"%PDF", "application/pdf", "Is this covered?")
    assert out == {"result": "x"}
    args, kwargs = post.call_args
    assert args[0] == policy.POLICY_API_URL
    assert kwargs["data"] == {"query": "Is this covered?"}
    assert kwargs["files"] == {"file": ("bill.pdf", b"%PDF", "application/pdf")}
    assert kwargs["timeout"] == policy.HTTP_TIMEOUT_S


def test_missing_content_type_defaults_to_octet_stream():
    with mock.patch("ui_lib.clients.policy.requests.post", return_value=_response(body={})) as post:
        submit_query("notes", b"", None, "q")
    assert post.call_args.kwargs["files"]["file"][2] == "application/octet-stream"


def test_error_status_uses_body_text():
    with mock.patch("ui_lib.clients.policy.requests.post", return_value=_response(ok=False, status_code=500, text="boom")):
        with pytest.raises(PolicyServiceError, match="boom") as exc:
            submit_query("a.txt", b"a", "text/plain", "q")
    assert exc.value.status_code == 500


def test_error_status_without_body():
    with mock.patch("ui_lib.clients.policy.requests.post", return_value=_response(ok=False, status_code=502)):
        with pytest.raises(PolicyServiceError, match="Request failed with 502"):
            submit_query("a.txt", b"a", "text/plain", "q")


def test_non_json_body():
    resp = _response(json_error=ValueError("Expecting value"))
    with mock.patch("ui_lib.clients.policy.requests.post", return_value=resp):
        with pytest.raises(PolicyServiceError, match="Malformed JSON"):
            submit_query("a.txt", b"a", "text/plain", "q")
