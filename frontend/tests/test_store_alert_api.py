"""Alert expiry and the HTTP API client"""
import io
import json
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest

from frontend.actions.alert import set_alert
from frontend.api import ApiClient, ApiError


def test_alert_expires_via_timer(store, no_alert_timers):
    alert_id = store.dispatch(set_alert("Saved", "success", timeout=3))
    assert store.get_state()["alert"] == [{"id": alert_id, "msg": "Saved", "alertType": "success"}]

    delay, callback = no_alert_timers.call_args[0][:2]
    removal = no_alert_timers.call_args[1]["args"][0]
    assert delay == 3
    callback(removal)
    assert store.get_state()["alert"] == []


def test_alert_without_timeout_stays(store, no_alert_timers):
    store.dispatch(set_alert("Sticky", "danger", timeout=None))
    no_alert_timers.assert_not_called()
    assert len(store.get_state()["alert"]) == 1


def _response(payload, status=200):
    resp = MagicMock()
    resp.status = status
    resp.read.return_value = json.dumps(payload).encode("utf-8")
    resp.__enter__.return_value = resp
    return resp


def test_api_client_sends_json_and_token():
    client = ApiClient("http://api.test/api")
    client.set_token("tok")
    with patch("frontend.api.urlopen", return_value=_response({"id": "p1"})) as mock_open:
        res = client.post("/posts", {"text": "hi"})

    assert res.status == 200
    assert res.data == {"id": "p1"}
    req = mock_open.call_args[0][0]
    assert req.full_url == "http://api.test/api/posts"
    assert req.get_method() == "POST"
    assert json.loads(req.data) == {"text": "hi"}
    assert req.get_header("Authorization") == "Bearer tok"


def test_api_client_http_error():
    client = ApiClient("http://api.test/api")
    body = io.BytesIO(json.dumps({"msg": "Post not found"}).encode("utf-8"))
    err = HTTPError("http://api.test/api/posts/x", 404, "Not Found", hdrs=None, fp=body)
    with patch("frontend.api.urlopen", side_effect=err):
        with pytest.raises(ApiError) as exc_info:
            client.get("/posts/x")

    assert exc_info.value.status == 404
    assert exc_info.value.msg == "Post not found"
    assert exc_info.value.errors == []


def test_api_client_unreachable():
    client = ApiClient("http://api.test/api")
    with patch("frontend.api.urlopen", side_effect=URLError("connection refused")):
        with pytest.raises(ApiError) as exc_info:
            client.get("/posts")
    assert exc_info.value.status == 0
