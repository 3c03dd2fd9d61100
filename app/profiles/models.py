from sqlalchemy import Column, Integer, String, DateTime
from app.core.database import Base


class Profile(Base):
    __tablename__ = "profiles"
    __table_args__ = {"sqlite_autoincrement": True}  # ids are never reused

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
