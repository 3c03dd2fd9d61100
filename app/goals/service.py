import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.goals.models import Goal
from app.goals.schemas import GoalCreate
from app.profiles.service import require_profile

logger = logging.getLogger(__name__)


def create_goal(db: Session, goal: GoalCreate, now: datetime) -> Goal:
    if not goal.profile_id or not goal.goal_text:
        raise ValidationError("profile_id and goal_text are required")

    require_profile(db, goal.profile_id)

    new_goal = Goal(
        profile_id=goal.profile_id,
        goal_text=goal.goal_text,
        created_at=now,
    )
    db.add(new_goal)
    db.commit()
    db.refresh(new_goal)
    logger.info(f"Created goal {new_goal.id} for profile {new_goal.profile_id}")
    return new_goal


def get_latest_goal(db: Session, profile_id: int) -> Optional[Goal]:
    return (
        db.query(Goal)
        .filter(Goal.profile_id == profile_id)
        .order_by(Goal.created_at.desc(), Goal.id.desc())
        .first()
    )
