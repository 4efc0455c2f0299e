"""
Profile service - upsert, lookup, experience/education edits and account deletion
"""
from sqlalchemy.orm import Session

from backend.app.core.config import SOCIAL_NETWORKS, settings
from backend.app.core.exceptions import NotFoundError
from backend.app.models.post import Post
from backend.app.models.profile import Profile
from backend.app.models.user import User
from backend.app.schemas.profile import EducationIn, ExperienceIn, ProfileUpsert
from backend.app.services.url_normalization import UrlNormalizationService
from backend.app.utils.ids import is_valid_id, new_id

NO_PROFILE_MSG = "There is no profile for this user"
PROFILE_NOT_FOUND_MSG = "Profile not found"

# Optional scalar fields: request field -> column. Only fields sent by the client are merged.
_MERGE_FIELDS = {
    "company": "company",
    "location": "location",
    "bio": "bio",
    "githubUsername": "github_username",
}


def _not_found(msg: str) -> NotFoundError:
    return NotFoundError(msg, status_code=settings.profile_not_found_status)


def payload_to_profile_dict(payload: ProfileUpsert) -> dict:
    """Convert an upsert payload to column values (skills split, URLs normalized)."""
    data = {
        "status": payload.status,
        "skills": list(payload.skills),
        "website": UrlNormalizationService.normalize(payload.website),
        "social": UrlNormalizationService.normalize_social(
            {network: getattr(payload, network) for network in SOCIAL_NETWORKS}
        ),
    }
    for field, column in _MERGE_FIELDS.items():
        if field in payload.model_fields_set:
            data[column] = getattr(payload, field)
    return data


class ProfileService:
    @staticmethod
    def get_by_user_id(db: Session, user_id: str) -> Profile | None:
        return db.query(Profile).filter(Profile.user_id == user_id).first()

    @staticmethod
    def get_my_profile(db: Session, user_id: str) -> Profile:
        """Profile of the authenticated user, or NotFound."""
        profile = ProfileService.get_by_user_id(db, user_id)
        if not profile:
            raise _not_found(NO_PROFILE_MSG)
        return profile

    @staticmethod
    def get_profile_by_user(db: Session, user_id: str) -> Profile:
        """Public lookup; malformed ids are reported exactly like missing profiles."""
        if not is_valid_id(user_id):
            raise _not_found(PROFILE_NOT_FOUND_MSG)
        profile = ProfileService.get_by_user_id(db, user_id)
        if not profile:
            raise _not_found(PROFILE_NOT_FOUND_MSG)
        return profile

    @staticmethod
    def list_profiles(db: Session) -> list[Profile]:
        return db.query(Profile).order_by(Profile.date.asc()).all()

    @staticmethod
    def upsert_profile(db: Session, user: User, payload: ProfileUpsert) -> Profile:
        """Create the user's profile, or merge the payload into the existing one."""
        data = payload_to_profile_dict(payload)
        profile = ProfileService.get_by_user_id(db, user.id)
        if not profile:
            profile = Profile(user_id=user.id, experience=[], education=[])
            db.add(profile)
        for key, value in data.items():
            setattr(profile, key, value)
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def delete_account(db: Session, user_id: str) -> None:
        """
        Delete the user's posts, then profile, then the user record.
        All three deletes are committed together.
        """
        try:
            db.query(Post).filter(Post.user_id == user_id).delete(synchronize_session=False)
            db.query(Profile).filter(Profile.user_id == user_id).delete(synchronize_session=False)
            db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
            db.commit()
        except Exception:
            db.rollback()
            raise

    @staticmethod
    def add_experience(db: Session, user_id: str, entry: ExperienceIn) -> Profile:
        profile = ProfileService.get_my_profile(db, user_id)
        item = {"id": new_id(), **entry.model_dump(mode="json", by_alias=True)}
        profile.experience = [item] + list(profile.experience or [])
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def remove_experience(db: Session, user_id: str, exp_id: str) -> Profile:
        """Remove an experience entry by id. Unknown ids leave the profile unchanged."""
        profile = ProfileService.get_my_profile(db, user_id)
        remaining = [e for e in (profile.experience or []) if e.get("id") != exp_id]
        if len(remaining) != len(profile.experience or []):
            profile.experience = remaining
            db.commit()
            db.refresh(profile)
        return profile

    @staticmethod
    def add_education(db: Session, user_id: str, entry: EducationIn) -> Profile:
        profile = ProfileService.get_my_profile(db, user_id)
        item = {"id": new_id(), **entry.model_dump(mode="json", by_alias=True)}
        profile.education = [item] + list(profile.education or [])
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def remove_education(db: Session, user_id: str, edu_id: str) -> Profile:
        """Remove an education entry by id. Unknown ids leave the profile unchanged."""
        profile = ProfileService.get_my_profile(db, user_id)
        remaining = [e for e in (profile.education or []) if e.get("id") != edu_id]
        if len(remaining) != len(profile.education or []):
            profile.education = remaining
            db.commit()
            db.refresh(profile)
        return profile
