"""
Password hashing and JWT access tokens
"""
import hashlib
from datetime import datetime, timedelta
from urllib.parse import urlencode

import bcrypt
from jose import JWTError, jwt

from backend.app.core.config import (
    GRAVATAR_BASE_URL,
    GRAVATAR_DEFAULT,
    GRAVATAR_RATING,
    GRAVATAR_SIZE,
    settings,
)


def get_password_hash(password: str) -> str:
    """Hash a plain password with bcrypt (salted)."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Sign `data` into a JWT. Adds `exp` (defaults to settings.access_token_expire_minutes)."""
    to_encode = data.copy()
    expire = datetime.utcnow() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def issue_token(user_id: str) -> str:
    """Issue an access token for a user id."""
    return create_access_token(data={"sub": user_id})


def decode_token(token: str) -> str | None:
    """
    Verify a token and return the user id it carries.
    Returns None for malformed, expired or badly-signed tokens, or tokens without `sub`.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        return None
    return user_id


def gravatar_url(email: str) -> str:
    """Gravatar avatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": GRAVATAR_SIZE, "r": GRAVATAR_RATING, "d": GRAVATAR_DEFAULT})
    return f"{GRAVATAR_BASE_URL}/{digest}?{query}"
