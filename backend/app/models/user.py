"""
User database model - account credentials and avatar
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String

from backend.app.db.base import Base
from backend.app.utils.ids import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    avatar_url = Column(String(512), default="")

    created_at = Column(DateTime, default=datetime.utcnow)
