"""
Post Pydantic schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TextIn(BaseModel):
    """Body of a new post or comment"""
    text: str = Field(default="", validate_default=True)

    @field_validator("text")
    @classmethod
    def text_required(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Text is required")
        return v


class Like(BaseModel):
    id: str
    userId: str


class Comment(BaseModel):
    id: str
    userId: str
    text: str
    name: str = ""
    avatarUrl: str = ""
    date: Optional[datetime] = None


class PostResponse(BaseModel):
    id: str
    userId: str
    text: str
    name: str = ""
    avatarUrl: str = ""
    likes: List[Like] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    date: Optional[datetime] = None


class MessageResponse(BaseModel):
    msg: str


def post_model_to_response(post) -> PostResponse:
    return PostResponse(
        id=post.id,
        userId=post.user_id,
        text=post.text,
        name=post.name or "",
        avatarUrl=post.avatar_url or "",
        likes=[Like.model_validate(like) for like in (post.likes or [])],
        comments=[Comment.model_validate(c) for c in (post.comments or [])],
        date=post.date,
    )
