from typing import Optional
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependency import Clock, get_clock
from app.core.errors import StorageError
from app.goals.schemas import GoalCreate, GoalResponse
from app.goals.service import create_goal

router = APIRouter(prefix="/goals", tags=["Goals"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=GoalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new goal",
    description="Record a goal for an existing profile.",
    responses={
        201: {"description": "Goal created successfully."},
        400: {"description": "profile_id or goal_text is missing."},
        404: {"description": "Profile not found."},
        500: {"description": "Goal creation failed."},
    },
)
def create_goal_route(
    goal: Optional[GoalCreate] = None,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> GoalResponse:
    goal = goal or GoalCreate()
    try:
        return create_goal(db, goal, clock())
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create goal for profile {goal.profile_id}: {e}")
        raise StorageError("Failed to create goal") from e
