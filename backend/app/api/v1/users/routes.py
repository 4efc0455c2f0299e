"""
User endpoints - Register
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.core.exceptions import SERVER_ERROR_MSG, FieldValidationError
from backend.app.core.logging_config import get_logger
from backend.app.schemas.user import TokenResponse, UserRegister
from backend.app.services.auth_service import AuthService

logger = get_logger("api.users")
router = APIRouter()


@router.post("", response_model=TokenResponse)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account. Returns a token (user is logged in after register).

    - **name**: Display name
    - **email**: User's email address (must be unique)
    - **password**: 6 or more characters
    """
    logger.info("Registration attempt for email=%s", user_data.email)
    try:
        result = AuthService.register_user(db, user_data)

        if not result["success"]:
            logger.warning(
                "Registration failed email=%s reason=%s",
                user_data.email,
                result["message"],
            )
            raise FieldValidationError.single(result["message"], param="email")

        user = result["user"]
        logger.info(
            "User registered successfully user_id=%s email=%s",
            user.id,
            user.email,
        )
        return TokenResponse(token=result["token"])
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(
            "Registration error email=%s error=%s",
            user_data.email,
            str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=SERVER_ERROR_MSG,
        )
