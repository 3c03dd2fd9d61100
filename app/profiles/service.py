import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.profiles.models import Profile
from app.profiles.schemas import ProfileCreate

logger = logging.getLogger(__name__)


def create_profile(db: Session, profile: ProfileCreate, now: datetime) -> Profile:
    if not profile.name:
        raise ValidationError("name is required")

    new_profile = Profile(name=profile.name, created_at=now)
    db.add(new_profile)
    db.commit()
    db.refresh(new_profile)
    logger.info(f"Created profile {new_profile.id}")
    return new_profile


def get_profile(db: Session, profile_id: int) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def require_profile(db: Session, profile_id: int) -> Profile:
    """
    Loads a profile that a child row is about to reference.

    The row is selected FOR UPDATE so the existence check and the child
    insert that follows share one transaction; SQLite ignores the clause.

    Raises:
        NotFoundError: If the profile does not exist.
    """
    profile = (
        db.query(Profile)
        .filter(Profile.id == profile_id)
        .with_for_update()
        .first()
    )
    if profile is None:
        raise NotFoundError("profile not found")
    return profile
