"""Project schemas for API responses."""

from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProjectResponse(CamelModel):
    """Schema for a project in the listing."""

    id: int
    slug: str
    name: str
    entry_point: str
    is_active: bool
    uploaded_at: datetime

    class Config:
        from_attributes = True


class UploadResponse(CamelModel):
    """Schema for a successful upload."""

    id: int
    slug: str
    name: str
    message: str
    url: str


class ToggleResponse(CamelModel):
    """Schema for an activation toggle."""

    message: str
    is_active: bool


class MessageResponse(BaseModel):
    """Schema for a plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Schema for error bodies."""

    error: str
