import logging
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.goals.service import get_latest_goal
from app.profiles.service import require_profile
from app.roadmaps.generator import make_stub_roadmap
from app.roadmaps.models import Roadmap
from app.roadmaps.schemas import RoadmapGenerate

logger = logging.getLogger(__name__)


def generate_roadmap(db: Session, data: RoadmapGenerate, now: datetime) -> Tuple[Roadmap, Dict[str, Any]]:
    """
    Builds a roadmap for a profile and stores it.

    The roadmap is linked to the profile's most recent goal, whatever its
    text, or to no goal if the profile has none.

    Returns:
        tuple: The saved row and the in-memory document it was built from.
    """
    if not data.profile_id or not data.goal_text:
        raise ValidationError("profile_id and goal_text are required")

    require_profile(db, data.profile_id)

    document = make_stub_roadmap(data.goal_text)
    latest_goal = get_latest_goal(db, data.profile_id)

    roadmap = Roadmap(
        profile_id=data.profile_id,
        goal_id=latest_goal.id if latest_goal else None,
        document=document,
        created_at=now,
    )
    db.add(roadmap)
    db.commit()
    db.refresh(roadmap)
    logger.info(f"Generated roadmap {roadmap.id} for profile {roadmap.profile_id}")
    return roadmap, document


def get_latest_roadmap(db: Session, profile_id: Optional[int]) -> Dict[str, Any]:
    if not profile_id:
        raise ValidationError("profile_id required")

    roadmap = (
        db.query(Roadmap)
        .filter(Roadmap.profile_id == profile_id)
        .order_by(Roadmap.created_at.desc(), Roadmap.id.desc())
        .first()
    )
    if roadmap is None:
        raise NotFoundError("no roadmap for profile")
    return roadmap.document
