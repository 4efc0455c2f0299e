"""
Profile database model - one per user.
Experience, education and social links are embedded as JSON documents.
"""
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base import Base
from backend.app.utils.ids import new_id


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    company = Column(String(255), nullable=True)
    website = Column(String(512), default="")
    location = Column(String(255), nullable=True)
    status = Column(String(255), nullable=False)
    skills = Column(JSON, default=list)  # ["python", "fastapi", ...]
    bio = Column(Text, nullable=True)
    github_username = Column(String(255), nullable=True)

    # Most recent first: [{id, title, company, location, from, to, current, description}]
    experience = Column(JSON, default=list)
    # Most recent first: [{id, school, degree, fieldOfStudy, from, to, current, description}]
    education = Column(JSON, default=list)
    social = Column(JSON, default=dict)  # {youtube, twitter, facebook, linkedin, instagram}

    date = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", lazy="joined")
