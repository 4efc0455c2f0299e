"""
Authentication service business logic
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash, gravatar_url, issue_token, verify_password
from backend.app.models.user import User
from backend.app.schemas.user import UserLogin, UserRegister


class AuthService:
    """Service for authentication operations"""

    @staticmethod
    def register_user(db: Session, user_data: UserRegister):
        """Register a new user; the caller is logged in with the returned token."""
        existing_user = db.query(User).filter(User.email == user_data.email).first()
        if existing_user:
            return {"success": False, "message": "User already exists"}

        new_user = User(
            name=user_data.name,
            email=user_data.email,
            avatar_url=gravatar_url(user_data.email),
            hashed_password=get_password_hash(user_data.password),
        )
        try:
            db.add(new_user)
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            db.rollback()
            return {"success": False, "message": "User already exists"}
        db.refresh(new_user)

        return {
            "success": True,
            "user": new_user,
            "token": issue_token(new_user.id),
        }

    @staticmethod
    def login_user(db: Session, login_data: UserLogin):
        """Authenticate user and return access token"""
        user = db.query(User).filter(User.email == login_data.email).first()
        if not user or not verify_password(login_data.password, user.hashed_password):
            return {"success": False, "message": "Invalid credentials"}

        return {
            "success": True,
            "user": user,
            "token": issue_token(user.id),
        }
