"""URL normalization for profile links - canonical HTTPS form before persistence."""
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


class UrlNormalizationService:
    """
    Normalizes user-entered URLs ("github.com/me/", "http://WWW.site.dev:443/a?b=2&a=1")
    into one canonical form ("https://github.com/me", "https://site.dev/a?a=1&b=2").
    """

    DEFAULT_PORTS = {"http": 80, "https": 443}

    @classmethod
    def normalize(cls, url: Optional[str]) -> str:
        """
        Return the canonical HTTPS form of `url`, or "" for empty input.
        - missing or http scheme becomes https
        - host lower-cased, leading "www." and default port dropped
        - query parameters sorted, trailing slash and empty fragment removed
        """
        raw = (url or "").strip()
        if not raw:
            return ""
        if raw.startswith("//"):
            raw = "https:" + raw
        elif "://" not in raw:
            raw = "https://" + raw

        parts = urlsplit(raw)
        scheme = parts.scheme.lower()
        if scheme == "http":
            scheme = "https"

        host = (parts.hostname or "").lower()
        if host.startswith("www.") and host.count(".") > 1:
            host = host[len("www."):]
        netloc = host
        try:
            port = parts.port
        except ValueError:
            port = None
        if port and port not in cls.DEFAULT_PORTS.values():
            netloc = f"{host}:{port}"
        if parts.username:
            auth = parts.username + (f":{parts.password}" if parts.password else "")
            netloc = f"{auth}@{netloc}"

        path = parts.path.rstrip("/")
        query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)))
        return urlunsplit((scheme, netloc, path, query, parts.fragment))

    @classmethod
    def normalize_social(cls, links: dict) -> dict:
        """Normalize each non-empty social link; empty links are left out."""
        return {key: cls.normalize(value) for key, value in links.items() if value and value.strip()}
