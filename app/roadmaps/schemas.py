from typing import List, Optional
from pydantic import BaseModel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True


class RoadmapTask(BaseSchema):
    title: str
    steps: List[str]


class RoadmapActivity(BaseSchema):
    title: str
    description: str
    tasks: List[RoadmapTask]


class RoadmapDocument(BaseSchema):
    goal: str
    activities: List[RoadmapActivity]


class RoadmapGenerate(BaseSchema):
    profile_id: Optional[int] = None
    goal_text: Optional[str] = None


class RoadmapGenerateResponse(BaseSchema):
    id: int
    roadmap: RoadmapDocument
