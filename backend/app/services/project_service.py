"""Project lifecycle: upload, activation, deletion and listing."""

import time
from dataclasses import dataclass
from typing import Protocol

import structlog

from app.core.config import Settings, get_settings
from app.core.exceptions import (
    IntegrityError,
    InvalidInputError,
    NotFoundError,
    SlugCollisionError,
    StorageUnavailableError,
)
from app.core.storage.gateway import ProjectGateway
from app.models.database import Project

logger = structlog.get_logger(__name__)

ALLOWED_EXTENSION = ".html"


class UploadedArtifact(Protocol):
    """The subset of ``starlette.datastructures.UploadFile`` the service uses."""

    filename: str | None
    size: int | None

    async def read(self, size: int = -1) -> bytes: ...


@dataclass(frozen=True)
class CreatedProject:
    """Result of a successful upload."""

    id: int
    slug: str
    name: str
    url: str


def public_url(slug: str) -> str:
    return f"/projects/{slug}/"


def storage_filename() -> str:
    """Storage name for a new file, derived from the current time in milliseconds."""
    return f"file_{int(time.time() * 1000)}{ALLOWED_EXTENSION}"


class ProjectService:
    """Create, toggle, delete and list projects through a :class:`ProjectGateway`."""

    def __init__(self, gateway: ProjectGateway, settings: Settings | None = None):
        self.gateway = gateway
        self.settings = settings or get_settings()

    def _validate_name(self, name: str | None) -> None:
        if not name or not name.strip():
            raise InvalidInputError("Project name is required")
        limit = self.settings.max_project_name_length
        if len(name) > limit:
            raise InvalidInputError(f"Project name must be at most {limit} characters")

    def _validate_size(self, size: int) -> None:
        if size > self.settings.max_upload_size:
            limit_mb = self.settings.max_upload_size // (1024 * 1024)
            raise InvalidInputError(f"File size must not exceed {limit_mb}MB")
        if size == 0:
            raise InvalidInputError("File must not be empty")

    async def create(self, name: str | None, upload: UploadedArtifact | None) -> CreatedProject:
        """
        Validate an upload and store it as a new project.

        The project and its file are written in one transaction.

        Args:
            name: Display name supplied by the uploader
            upload: The uploaded HTML file

        Returns:
            CreatedProject with the public slug and URL

        Raises:
            InvalidInputError: Upload or name rejected; nothing was written
            IntegrityError: The file row could not be stored for the new project
            StorageUnavailableError: The datastore failed or no free slug was found
        """
        if upload is None:
            raise InvalidInputError("No file selected")
        self._validate_name(name)

        original_name = upload.filename or ""
        if not original_name.endswith(ALLOWED_EXTENSION):
            raise InvalidInputError("Only HTML files are supported")

        if upload.size is not None:
            self._validate_size(upload.size)

        # Stored size is the length read, never the declared one
        data = await upload.read(self.settings.max_upload_size + 1)
        self._validate_size(len(data))

        content = data.decode("utf-8", errors="replace")
        filename = storage_filename()

        for attempt in range(1, self.settings.slug_max_attempts + 1):
            try:
                async with self.gateway.transaction():
                    project = await self.gateway.insert_project(name, original_name)
                    project_id, slug = project.id, project.slug
                    try:
                        await self.gateway.insert_file(
                            project_id=project_id,
                            filename=filename,
                            original_name=original_name,
                            content=content,
                            size=len(data),
                        )
                    except StorageUnavailableError as e:
                        logger.error(
                            "project_file_insert_failed",
                            project_id=project_id,
                            slug=slug,
                            operation=e.operation,
                        )
                        raise IntegrityError(slug) from e
            except SlugCollisionError as e:
                logger.warning("slug_collision", slug=e.slug, attempt=attempt)
                continue

            logger.info(
                "project_created",
                project_id=project_id,
                slug=slug,
                size=len(data),
                original_name=original_name,
            )
            return CreatedProject(id=project_id, slug=slug, name=name, url=public_url(slug))

        logger.error("slug_retries_exhausted", attempts=self.settings.slug_max_attempts)
        raise StorageUnavailableError(
            "insert_project",
            f"No unique slug after {self.settings.slug_max_attempts} attempts",
        )

    async def _get_or_404(self, slug: str) -> Project:
        project = await self.gateway.find_project_by_slug(slug)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def toggle_active(self, slug: str) -> bool:
        """Flip the activation flag of a project and return the new value."""
        project = await self._get_or_404(slug)
        new_status = not project.is_active
        async with self.gateway.transaction():
            matched = await self.gateway.set_active(slug, new_status)
        if not matched:
            raise NotFoundError("Project not found")
        logger.info("project_toggled", slug=slug, is_active=new_status)
        return new_status

    async def delete(self, slug: str) -> None:
        """Delete a project and all of its files, files first."""
        project = await self._get_or_404(slug)
        project_id = project.id
        async with self.gateway.transaction():
            removed = await self.gateway.delete_files_by_project(project_id)
            await self.gateway.delete_project_by_slug(slug)
        logger.info("project_deleted", slug=slug, project_id=project_id, files_removed=removed)

    async def list_projects(self) -> list[Project]:
        """All projects, newest first, active or not."""
        return await self.gateway.list_projects()

    async def find_orphans(self) -> list[Project]:
        """Projects stored without any file."""
        orphans = await self.gateway.find_orphaned_projects()
        if orphans:
            logger.warning(
                "orphaned_projects",
                count=len(orphans),
                slugs=[p.slug for p in orphans],
            )
        return orphans
