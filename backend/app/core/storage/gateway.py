"""Persistence gateway for projects and their files."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from sqlalchemy import delete, exists, select, update
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import SlugCollisionError, StorageUnavailableError
from app.core.slugs import MIN_SLUG_BYTES, generate_slug
from app.models.database import File, Project

logger = structlog.get_logger(__name__)


def _is_slug_collision(error: sa_exc.IntegrityError) -> bool:
    message = str(error.orig).lower()
    return "slug" in message and ("unique" in message or "duplicate" in message)


class ProjectGateway:
    """CRUD over the ``projects`` and ``files`` tables.

    Writes are flushed, not committed. Callers group them with
    :meth:`transaction`, which commits on success and rolls back on error.
    Any SQLAlchemy failure surfaces as :class:`StorageUnavailableError`.
    """

    def __init__(self, session: AsyncSession, slug_bytes: int = MIN_SLUG_BYTES):
        self.session = session
        self.slug_bytes = slug_bytes

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit everything done inside the block, or roll it all back."""
        try:
            yield
            await self._commit()
        except Exception:
            await self.session.rollback()
            raise

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("commit", e) from e

    def _storage_error(self, operation: str, error: Exception) -> StorageUnavailableError:
        logger.error("storage_error", operation=operation, error=str(error))
        return StorageUnavailableError(operation)

    async def insert_project(self, name: str, entry_point: str) -> Project:
        """
        Insert a project under a freshly generated slug.

        Raises:
            SlugCollisionError: The generated slug is already taken
            StorageUnavailableError: Any other datastore failure
        """
        slug = generate_slug(self.slug_bytes)
        project = Project(slug=slug, name=name, entry_point=entry_point, is_active=True)
        self.session.add(project)
        try:
            await self.session.flush()
        except sa_exc.IntegrityError as e:
            if _is_slug_collision(e):
                raise SlugCollisionError(slug) from e
            raise self._storage_error("insert_project", e) from e
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("insert_project", e) from e
        return project

    async def insert_file(
        self,
        project_id: int,
        filename: str,
        original_name: str,
        content: str,
        size: int,
    ) -> File:
        """Insert a file row owned by ``project_id``."""
        file = File(
            project_id=project_id,
            filename=filename,
            original_name=original_name,
            content=content,
            size=size,
        )
        self.session.add(file)
        try:
            await self.session.flush()
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("insert_file", e) from e
        return file

    async def find_project_by_slug(self, slug: str) -> Project | None:
        query = (
            select(Project)
            .where(Project.slug == slug)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(query)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("find_project_by_slug", e) from e
        return result.scalar_one_or_none()

    async def list_projects(self) -> list[Project]:
        """Return all projects, most recent (highest id) first."""
        query = select(Project).order_by(Project.id.desc())
        try:
            result = await self.session.execute(query)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("list_projects", e) from e
        return list(result.scalars().all())

    async def find_first_file_by_project(self, project_id: int) -> File | None:
        """Return the earliest inserted file of a project."""
        query = select(File).where(File.project_id == project_id).order_by(File.id).limit(1)
        try:
            result = await self.session.execute(query)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("find_first_file_by_project", e) from e
        return result.scalar_one_or_none()

    async def find_orphaned_projects(self) -> list[Project]:
        """Return projects that have no file row."""
        has_file = exists().where(File.project_id == Project.id)
        query = select(Project).where(~has_file).order_by(Project.id)
        try:
            result = await self.session.execute(query)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("find_orphaned_projects", e) from e
        return list(result.scalars().all())

    async def set_active(self, slug: str, is_active: bool) -> bool:
        """Set the activation flag. Returns False if no project matched."""
        stmt = (
            update(Project)
            .where(Project.slug == slug)
            .values(is_active=is_active)
            .execution_options(synchronize_session="fetch")
        )
        try:
            result = await self.session.execute(stmt)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("set_active", e) from e
        return result.rowcount > 0

    async def delete_files_by_project(self, project_id: int) -> int:
        stmt = delete(File).where(File.project_id == project_id)
        try:
            result = await self.session.execute(stmt)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("delete_files_by_project", e) from e
        return result.rowcount

    async def delete_project_by_slug(self, slug: str) -> int:
        stmt = delete(Project).where(Project.slug == slug)
        try:
            result = await self.session.execute(stmt)
        except sa_exc.SQLAlchemyError as e:
            raise self._storage_error("delete_project_by_slug", e) from e
        return result.rowcount
