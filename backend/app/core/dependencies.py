"""
Dependency injection utilities - DB session and bearer-token request guard
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from backend.app.core.exceptions import NotFoundError, UnauthorizedError
from backend.app.core.logging_config import get_logger
from backend.app.core.security import decode_token
from backend.app.db.session import SessionLocal
from backend.app.models.user import User

logger = get_logger("core.dependencies")
security = HTTPBearer(auto_error=False)


def get_db() -> Session:
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """Admit the request only with a valid bearer token. Returns the user id it carries."""
    if not credentials:
        raise UnauthorizedError("No token, authorization denied")
    user_id = decode_token(credentials.credentials)
    if not user_id:
        logger.warning("Rejected invalid or expired token")
        raise UnauthorizedError("Token is not valid")
    return user_id


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Load the authenticated user's record; 404 if the account no longer exists."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user
