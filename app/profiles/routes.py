from typing import Optional
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependency import Clock, get_clock
from app.core.errors import NotFoundError, StorageError
from app.profiles.schemas import ProfileCreate, ProfileResponse
from app.profiles.service import create_profile, get_profile

router = APIRouter(prefix="/profiles", tags=["Profiles"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    description="Create a new artist profile from a display name.",
    responses={
        201: {"description": "Profile created successfully."},
        400: {"description": "Name is missing."},
        500: {"description": "Profile creation failed."},
    },
)
def create_profile_route(
    profile: Optional[ProfileCreate] = None,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> ProfileResponse:
    try:
        return create_profile(db, profile or ProfileCreate(), clock())
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create profile: {e}")
        raise StorageError("Failed to create profile") from e


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Get a profile",
    description="Retrieve a profile by its numeric ID.",
    responses={
        200: {"description": "Profile retrieved successfully."},
        404: {"description": "Profile not found."},
        500: {"description": "Failed to retrieve profile."},
    },
)
def read_profile_route(
    profile_id: int,
    db: Session = Depends(get_db),
) -> ProfileResponse:
    try:
        profile = get_profile(db, profile_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch profile {profile_id}: {e}")
        raise StorageError("Failed to retrieve profile") from e
    if profile is None:
        raise NotFoundError("not found")
    return profile
