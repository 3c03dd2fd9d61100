from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class GoalCreate(BaseSchema):
    profile_id: Optional[int] = None
    goal_text: Optional[str] = None


class GoalResponse(BaseSchema):
    id: int
    profile_id: int
    goal_text: str
    created_at: datetime
