"""Project management API routes."""

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.api.deps import get_project_service
from app.models.schemas import (
    ErrorResponse,
    MessageResponse,
    ProjectResponse,
    ToggleResponse,
    UploadResponse,
)
from app.services.project_service import ProjectService

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=list[ProjectResponse])
async def list_projects(service: ProjectService = Depends(get_project_service)):
    """List all projects, newest first, including deactivated ones."""
    projects = await service.list_projects()
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_project(
    file: UploadFile | None = File(None),
    project_name: str | None = Form(None, alias="projectName"),
    service: ProjectService = Depends(get_project_service),
):
    """
    Upload a single HTML file as a new project.

    The file must end in .html, be non-empty and at most 5MB.
    The project name must be 1-50 characters.
    """
    created = await service.create(project_name, file)
    return UploadResponse(
        id=created.id,
        slug=created.slug,
        name=created.name,
        message="HTML file uploaded successfully",
        url=created.url,
    )


@router.patch(
    "/projects/{slug}/toggle",
    response_model=ToggleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_project(slug: str, service: ProjectService = Depends(get_project_service)):
    """Activate a deactivated project or deactivate an active one."""
    is_active = await service.toggle_active(slug)
    return ToggleResponse(
        message="Project activated" if is_active else "Project deactivated",
        is_active=is_active,
    )


@router.delete(
    "/projects/{slug}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_project(slug: str, service: ProjectService = Depends(get_project_service)):
    """Delete a project together with its files."""
    await service.delete(slug)
    return MessageResponse(message="Project deleted successfully")
