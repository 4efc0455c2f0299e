"""
Post database model - likes and comments are embedded JSON lists, newest first
"""
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text

from backend.app.db.base import Base
from backend.app.utils.ids import new_id


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    text = Column(Text, nullable=False)
    # Author name/avatar as they were when the post was written
    name = Column(String(255), default="")
    avatar_url = Column(String(512), default="")

    likes = Column(JSON, default=list)  # [{id, userId}]
    comments = Column(JSON, default=list)  # [{id, userId, text, name, avatarUrl, date}]

    date = Column(DateTime, default=datetime.utcnow, index=True)
