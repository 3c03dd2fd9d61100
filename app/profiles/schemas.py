from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class ProfileCreate(BaseSchema):
    name: Optional[str] = None


class ProfileResponse(BaseSchema):
    id: int
    name: str
    created_at: datetime
