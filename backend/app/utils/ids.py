"""Document identifiers - 32-char lowercase hex (uuid4)."""
import re
import uuid

_ID_RE = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: str | None) -> bool:
    """True when `value` has the shape of an id issued by new_id()."""
    return bool(value) and bool(_ID_RE.match(value))
