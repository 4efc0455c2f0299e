"""
GitHub repository lookup - read-only passthrough to the GitHub REST API
"""
import json
from urllib.parse import quote, urlencode
from urllib.request import Request, urlopen

from backend.app.core.config import settings
from backend.app.core.logging_config import get_logger

logger = get_logger("services.github")


class GithubLookupError(Exception):
    """Any failure talking to GitHub: network, rate limit, unknown user, bad payload."""


def build_repos_url(username: str) -> str:
    query = urlencode({"per_page": settings.github_repos_per_page, "sort": "created:asc"}, safe=":")
    return f"{settings.github_api_url.rstrip('/')}/users/{quote(username, safe='')}/repos?{query}"


def fetch_user_repos(username: str) -> list[dict]:
    """
    Latest repos of a GitHub user (page size from settings, sorted by creation).
    Raises GithubLookupError on any failure; the call is not retried.
    """
    headers = {"User-Agent": settings.app_name, "Accept": "application/vnd.github+json"}
    if settings.github_token:
        headers["Authorization"] = f"token {settings.github_token}"
    req = Request(build_repos_url(username), headers=headers, method="GET")
    try:
        with urlopen(req, timeout=settings.http_request_timeout) as resp:
            repos = json.loads(resp.read().decode("utf-8"))
    except Exception as e:
        logger.warning("GitHub lookup failed username=%s error=%s", username, e)
        raise GithubLookupError(str(e)) from e
    if not isinstance(repos, list):
        raise GithubLookupError("Unexpected GitHub response")
    return repos
