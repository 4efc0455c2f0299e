"""
Profile endpoints - own profile upsert, public lookups, experience/education, GitHub repos
"""
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_user, get_current_user_id, get_db
from backend.app.core.exceptions import SERVER_ERROR_MSG, NotFoundError
from backend.app.core.logging_config import get_logger
from backend.app.models.user import User
from backend.app.schemas.post import MessageResponse
from backend.app.schemas.profile import (
    EducationIn,
    ExperienceIn,
    ProfileResponse,
    ProfileUpsert,
    profile_model_to_response,
)
from backend.app.services.github_service import GithubLookupError, fetch_user_repos
from backend.app.services.profile_service import ProfileService

logger = get_logger("api.profile")
router = APIRouter()


def _server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR_MSG,
    )


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Get current user's profile, with the owner's name and avatar."""
    profile = ProfileService.get_my_profile(db, user_id)
    return profile_model_to_response(profile)


@router.post("", response_model=ProfileResponse)
def upsert_profile(
    payload: ProfileUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create or update the current user's profile.

    - **status** and **skills** are required; skills may be a list or "a, b, c"
    - **website** and social links are stored as canonical https URLs
    """
    try:
        profile = ProfileService.upsert_profile(db, current_user, payload)
        logger.info("Profile saved user_id=%s profile_id=%s", current_user.id, profile.id)
        return profile_model_to_response(profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Profile upsert error user_id=%s error=%s", current_user.id, str(e))
        raise _server_error()


@router.get("", response_model=List[ProfileResponse])
def list_profiles(db: Session = Depends(get_db)):
    """Get all profiles (public)."""
    return [profile_model_to_response(p) for p in ProfileService.list_profiles(db)]


@router.get("/user/{user_id}", response_model=ProfileResponse)
def get_profile_by_user(user_id: str, db: Session = Depends(get_db)):
    """Get a profile by user id (public)."""
    profile = ProfileService.get_profile_by_user(db, user_id)
    return profile_model_to_response(profile)


@router.delete("", response_model=MessageResponse)
def delete_account(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Delete the current user's posts, profile and account."""
    try:
        ProfileService.delete_account(db, user_id)
        logger.info("Account deleted user_id=%s", user_id)
        return MessageResponse(msg="User deleted")
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Account delete error user_id=%s error=%s", user_id, str(e))
        raise _server_error()


@router.put("/experience", response_model=ProfileResponse)
def add_experience(
    entry: ExperienceIn,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Add an experience entry at the top of the list."""
    try:
        profile = ProfileService.add_experience(db, user_id, entry)
        return profile_model_to_response(profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Add experience error user_id=%s error=%s", user_id, str(e))
        raise _server_error()


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
def remove_experience(
    exp_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Remove an experience entry; unknown ids are a no-op."""
    try:
        profile = ProfileService.remove_experience(db, user_id, exp_id)
        return profile_model_to_response(profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Remove experience error user_id=%s error=%s", user_id, str(e))
        raise _server_error()


@router.put("/education", response_model=ProfileResponse)
def add_education(
    entry: EducationIn,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Add an education entry at the top of the list."""
    try:
        profile = ProfileService.add_education(db, user_id, entry)
        return profile_model_to_response(profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Add education error user_id=%s error=%s", user_id, str(e))
        raise _server_error()


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
def remove_education(
    edu_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Remove an education entry; unknown ids are a no-op."""
    try:
        profile = ProfileService.remove_education(db, user_id, edu_id)
        return profile_model_to_response(profile)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Remove education error user_id=%s error=%s", user_id, str(e))
        raise _server_error()


@router.get("/github/{username}", response_model=List[dict[str, Any]])
def get_github_repos(username: str):
    """Latest public repos of a GitHub user. Every upstream failure is reported as 404."""
    try:
        return fetch_user_repos(username)
    except GithubLookupError:
        raise NotFoundError("No Github profile found", status_code=status.HTTP_404_NOT_FOUND)
