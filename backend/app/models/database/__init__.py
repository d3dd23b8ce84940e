"""Database models."""

from app.models.database.project import Project
from app.models.database.file import File

__all__ = ["Project", "File"]
