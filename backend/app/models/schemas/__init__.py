"""API schemas."""

from app.models.schemas.project import (
    ErrorResponse,
    MessageResponse,
    ProjectResponse,
    ToggleResponse,
    UploadResponse,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "ProjectResponse",
    "ToggleResponse",
    "UploadResponse",
]
