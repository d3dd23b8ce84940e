"""File database model."""

from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.core.storage.database import Base


class File(Base):
    """Stored content of an uploaded HTML artifact."""

    __tablename__ = "files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)  # storage name, e.g. file_1700000000000.html
    original_name = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    size = Column(Integer, nullable=False)  # bytes
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="files", lazy="raise")
