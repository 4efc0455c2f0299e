"""
Post service - posts, likes and comments
"""
from datetime import datetime

from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from backend.app.models.post import Post
from backend.app.models.user import User
from backend.app.utils.ids import is_valid_id, new_id

POST_NOT_FOUND_MSG = "Post not found"
COMMENT_NOT_FOUND_MSG = "Comment does not exist"


def _has_liked(post: Post, user_id: str) -> bool:
    return any(like.get("userId") == user_id for like in (post.likes or []))


class PostService:
    @staticmethod
    def create_post(db: Session, author: User, text: str) -> Post:
        """Create a post; author name and avatar are copied from the user record."""
        post = Post(
            user_id=author.id,
            text=text,
            name=author.name,
            avatar_url=author.avatar_url or "",
            likes=[],
            comments=[],
        )
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    @staticmethod
    def list_posts(db: Session) -> list[Post]:
        """All posts, newest first."""
        return db.query(Post).order_by(Post.date.desc()).all()

    @staticmethod
    def get_post(db: Session, post_id: str) -> Post:
        if not is_valid_id(post_id):
            raise NotFoundError(POST_NOT_FOUND_MSG, status_code=settings.post_not_found_status)
        post = db.query(Post).filter(Post.id == post_id).first()
        if not post:
            raise NotFoundError(POST_NOT_FOUND_MSG, status_code=settings.post_not_found_status)
        return post

    @staticmethod
    def delete_post(db: Session, user_id: str, post_id: str) -> None:
        post = PostService.get_post(db, post_id)
        if post.user_id != user_id:
            raise ForbiddenError()
        db.delete(post)
        db.commit()

    @staticmethod
    def like_post(db: Session, user_id: str, post_id: str) -> list[dict]:
        post = PostService.get_post(db, post_id)
        if _has_liked(post, user_id):
            raise ConflictError("Post already liked")
        post.likes = [{"id": new_id(), "userId": user_id}] + list(post.likes or [])
        db.commit()
        db.refresh(post)
        return post.likes

    @staticmethod
    def unlike_post(db: Session, user_id: str, post_id: str) -> list[dict]:
        post = PostService.get_post(db, post_id)
        if not _has_liked(post, user_id):
            raise ConflictError("Post has not yet been liked")
        post.likes = [like for like in post.likes if like.get("userId") != user_id]
        db.commit()
        db.refresh(post)
        return post.likes

    @staticmethod
    def add_comment(db: Session, author: User, post_id: str, text: str) -> list[dict]:
        post = PostService.get_post(db, post_id)
        comment = {
            "id": new_id(),
            "userId": author.id,
            "text": text,
            "name": author.name,
            "avatarUrl": author.avatar_url or "",
            "date": datetime.utcnow().isoformat(),
        }
        post.comments = [comment] + list(post.comments or [])
        db.commit()
        db.refresh(post)
        return post.comments

    @staticmethod
    def delete_comment(db: Session, user_id: str, post_id: str, comment_id: str) -> list[dict]:
        post = PostService.get_post(db, post_id)
        comment = next((c for c in (post.comments or []) if c.get("id") == comment_id), None)
        if not comment:
            raise NotFoundError(COMMENT_NOT_FOUND_MSG, status_code=settings.post_not_found_status)
        if comment.get("userId") != user_id:
            raise ForbiddenError()
        post.comments = [c for c in post.comments if c.get("id") != comment_id]
        db.commit()
        db.refresh(post)
        return post.comments
