from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependency import Clock, get_clock
from app.core.errors import StorageError, ValidationError
from app.roadmaps.schemas import RoadmapDocument, RoadmapGenerate, RoadmapGenerateResponse
from app.roadmaps.service import generate_roadmap, get_latest_roadmap

router = APIRouter(prefix="/roadmaps", tags=["Roadmaps"])
logger = logging.getLogger(__name__)


def _parse_profile_id(raw: Optional[str]) -> Optional[int]:
    # An empty query value counts as missing.
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("profile_id must be an integer")


@router.post(
    "/generate",
    response_model=RoadmapGenerateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a roadmap",
    description="Build a roadmap for a profile's goal and save it.",
    responses={
        201: {"description": "Roadmap generated successfully."},
        400: {"description": "profile_id or goal_text is missing."},
        404: {"description": "Profile not found."},
        500: {"description": "Roadmap generation failed."},
    },
)
def generate_roadmap_route(
    data: Optional[RoadmapGenerate] = None,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> RoadmapGenerateResponse:
    data = data or RoadmapGenerate()
    try:
        roadmap, document = generate_roadmap(db, data, clock())
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to generate roadmap for profile {data.profile_id}: {e}")
        raise StorageError("Failed to generate roadmap") from e
    return RoadmapGenerateResponse(id=roadmap.id, roadmap=document)


@router.get(
    "",
    response_model=RoadmapDocument,
    summary="Get the latest roadmap",
    description="Return the most recently generated roadmap document for a profile.",
    responses={
        200: {"description": "Roadmap retrieved successfully."},
        400: {"description": "profile_id is missing."},
        404: {"description": "No roadmap for this profile."},
        500: {"description": "Failed to retrieve roadmap."},
    },
)
def read_latest_roadmap_route(
    profile_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
) -> RoadmapDocument:
    try:
        return get_latest_roadmap(db, _parse_profile_id(profile_id))
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch roadmap for profile {profile_id}: {e}")
        raise StorageError("Failed to retrieve roadmap") from e
