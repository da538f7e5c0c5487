from sqlalchemy import Column, Integer, String, DateTime
from app.db import Base
from app.models.user import utcnow

class Movie(Base):
    __tablename__ = "movies"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    publishing_year = Column(Integer, nullable=False)
    poster_url = Column(String, nullable=True)
    poster_public_id = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
