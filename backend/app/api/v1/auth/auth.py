"""
Authentication endpoints - Login and Get Current User
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_user, get_db
from backend.app.core.exceptions import SERVER_ERROR_MSG, FieldValidationError
from backend.app.core.logging_config import get_logger
from backend.app.models.user import User
from backend.app.schemas.user import TokenResponse, UserLogin, UserResponse, user_model_to_response
from backend.app.services.auth_service import AuthService

logger = get_logger("api.auth")
router = APIRouter()


@router.get("", response_model=UserResponse)
def get_authenticated_user(current_user: User = Depends(get_current_user)):
    """
    Get the current authenticated user (id, name, email, avatarUrl).
    Used to restore auth state on app load. The password hash is never returned.
    """
    return user_model_to_response(current_user)


@router.post("", response_model=TokenResponse)
def login(login_data: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate user and get token

    - **email**: User's email address
    - **password**: User's password
    """
    logger.info("Login attempt for email=%s", login_data.email)
    try:
        result = AuthService.login_user(db, login_data)

        if not result["success"]:
            logger.warning(
                "Login failed email=%s reason=%s",
                login_data.email,
                result["message"],
            )
            raise FieldValidationError.single(result["message"])

        logger.info("User logged in user_id=%s", result["user"].id)
        return TokenResponse(token=result["token"])
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(
            "Login error email=%s error=%s",
            login_data.email,
            str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=SERVER_ERROR_MSG,
        )
