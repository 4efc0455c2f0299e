"""
HTTP client for the DevConnector REST API.
JSON in, JSON out; the bearer token is attached once set.
"""
import json
import logging
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"


class ApiError(Exception):
    """Non-2xx response (or no response at all, status 0)."""

    def __init__(self, status: int, status_text: str, data=None):
        super().__init__(f"{status} {status_text}")
        self.status = status
        self.status_text = status_text
        self.data = data if data is not None else {}

    @property
    def errors(self) -> list:
        """Field errors of a validation failure, [] otherwise."""
        if isinstance(self.data, dict):
            return self.data.get("errors") or []
        return []

    @property
    def msg(self) -> str:
        if isinstance(self.data, dict) and self.data.get("msg"):
            return self.data["msg"]
        return self.status_text


class ApiResponse:
    def __init__(self, status: int, data):
        self.status = status
        self.data = data


class ApiClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token: str | None = None

    def set_token(self, token: str | None) -> None:
        """Attach (or, with None, drop) the bearer token for later requests."""
        self.token = token

    def request(self, method: str, path: str, json_body=None) -> ApiResponse:
        headers = {"Accept": "application/json"}
        body = None
        if json_body is not None:
            body = json.dumps(json_body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        req = Request(f"{self.base_url}{path}", data=body, headers=headers, method=method)
        try:
            with urlopen(req, timeout=self.timeout) as resp:
                return ApiResponse(resp.status, _decode(resp.read()))
        except HTTPError as e:
            raise ApiError(e.code, e.reason or "", _decode(e.read())) from e
        except URLError as e:
            logger.warning("API unreachable %s %s: %s", method, path, e.reason)
            raise ApiError(0, str(e.reason)) from e

    def get(self, path: str) -> ApiResponse:
        return self.request("GET", path)

    def post(self, path: str, json_body=None) -> ApiResponse:
        return self.request("POST", path, json_body if json_body is not None else {})

    def put(self, path: str, json_body=None) -> ApiResponse:
        return self.request("PUT", path, json_body if json_body is not None else {})

    def delete(self, path: str) -> ApiResponse:
        return self.request("DELETE", path)


def _decode(raw: bytes):
    if not raw:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except ValueError:
        return raw.decode("utf-8", errors="replace")
