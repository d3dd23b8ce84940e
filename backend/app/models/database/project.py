"""Project database model."""

from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Integer, String, true
from sqlalchemy.orm import relationship

from app.core.storage.database import Base


class Project(Base):
    """Project model."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(50), nullable=False)
    entry_point = Column(String(255), nullable=False)  # original upload filename
    is_active = Column(Boolean, default=True, server_default=true(), nullable=False)
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    files = relationship("File", back_populates="project", order_by="File.id", lazy="raise")

    def __repr__(self) -> str:
        return f"<Project id={self.id} slug={self.slug!r} active={self.is_active}>"
