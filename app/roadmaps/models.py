from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON
from app.core.database import Base


class Roadmap(Base):
    __tablename__ = "roadmaps"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), index=True, nullable=False)
    goal_id = Column(Integer, ForeignKey("goals.id"), nullable=True)

    # Serialized roadmap document: {"goal": ..., "activities": [...]}
    document = Column("json", JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
