"""
Post endpoints - posts, likes and comments
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_user, get_current_user_id, get_db
from backend.app.core.exceptions import SERVER_ERROR_MSG
from backend.app.core.logging_config import get_logger
from backend.app.models.user import User
from backend.app.schemas.post import (
    Comment,
    Like,
    MessageResponse,
    PostResponse,
    TextIn,
    post_model_to_response,
)
from backend.app.services.post_service import PostService

logger = get_logger("api.posts")
router = APIRouter()


def _server_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR_MSG,
    )


@router.post("", response_model=PostResponse)
def create_post(
    body: TextIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a post signed with the author's current name and avatar."""
    try:
        post = PostService.create_post(db, current_user, body.text)
        logger.info("Post created user_id=%s post_id=%s", current_user.id, post.id)
        return post_model_to_response(post)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Create post error user_id=%s error=%s", current_user.id, str(e))
        raise _server_error()


@router.get("", response_model=List[PostResponse])
def list_posts(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """All posts, newest first."""
    return [post_model_to_response(p) for p in PostService.list_posts(db)]


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return post_model_to_response(PostService.get_post(db, post_id))


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Delete a post. Only its author may do so."""
    try:
        PostService.delete_post(db, user_id, post_id)
        logger.info("Post deleted user_id=%s post_id=%s", user_id, post_id)
        return MessageResponse(msg="Post removed")
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Delete post error post_id=%s error=%s", post_id, str(e))
        raise _server_error()


@router.put("/like/{post_id}", response_model=List[Like])
def like_post(
    post_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return PostService.like_post(db, user_id, post_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Like error post_id=%s error=%s", post_id, str(e))
        raise _server_error()


@router.put("/unlike/{post_id}", response_model=List[Like])
def unlike_post(
    post_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return PostService.unlike_post(db, user_id, post_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unlike error post_id=%s error=%s", post_id, str(e))
        raise _server_error()


@router.post("/comment/{post_id}", response_model=List[Comment])
def add_comment(
    post_id: str,
    body: TextIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Comment on a post; the comment list comes back newest first."""
    try:
        return PostService.add_comment(db, current_user, post_id, body.text)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Add comment error post_id=%s error=%s", post_id, str(e))
        raise _server_error()


@router.delete("/comment/{post_id}/{comment_id}", response_model=List[Comment])
def delete_comment(
    post_id: str,
    comment_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Delete a comment. Only its author may do so."""
    try:
        return PostService.delete_comment(db, user_id, post_id, comment_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Delete comment error post_id=%s error=%s", post_id, str(e))
        raise _server_error()
