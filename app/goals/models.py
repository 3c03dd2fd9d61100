from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from app.core.database import Base


class Goal(Base):
    __tablename__ = "goals"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(Integer, ForeignKey("profiles.id"), index=True, nullable=False)

    goal_text = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
