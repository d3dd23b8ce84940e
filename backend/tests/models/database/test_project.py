"""Tests for Project database model."""

import pytest
from datetime import datetime
from sqlalchemy import exc as sa_exc
from sqlalchemy import select

from app.models.database import Project


@pytest.mark.unit
class TestProjectModel:
    """Test cases for the Project model."""

    @pytest.mark.asyncio
    async def test_create_project(self, db_session):
        """Test creating a new project."""
        project = Project(slug="0123456789ab", name="Test Project", entry_point="index.html")
        db_session.add(project)
        await db_session.commit()
        await db_session.refresh(project)

        assert isinstance(project.id, int)
        assert project.slug == "0123456789ab"
        assert project.name == "Test Project"
        assert project.entry_point == "index.html"
        assert isinstance(project.uploaded_at, datetime)

    @pytest.mark.asyncio
    async def test_project_active_by_default(self, db_session):
        """Test that new projects are active."""
        project = Project(slug="0123456789ab", name="Default", entry_point="index.html")
        db_session.add(project)
        await db_session.commit()
        await db_session.refresh(project)

        assert project.is_active is True

    @pytest.mark.asyncio
    async def test_ids_increase(self, db_session):
        """Test that surrogate ids follow insertion order."""
        first = Project(slug="aaaaaaaaaaaa", name="First", entry_point="a.html")
        db_session.add(first)
        await db_session.flush()
        second = Project(slug="bbbbbbbbbbbb", name="Second", entry_point="b.html")
        db_session.add(second)
        await db_session.commit()

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_slug_unique(self, db_session):
        """Test that two projects cannot share a slug."""
        db_session.add(Project(slug="aaaaaaaaaaaa", name="First", entry_point="a.html"))
        await db_session.commit()

        db_session.add(Project(slug="aaaaaaaaaaaa", name="Second", entry_point="b.html"))
        with pytest.raises(sa_exc.IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    @pytest.mark.asyncio
    async def test_project_query(self, db_session, sample_project):
        """Test querying a project by slug."""
        query = select(Project).where(Project.slug == sample_project.slug)
        result = await db_session.execute(query)
        fetched = result.scalar_one()

        assert fetched.id == sample_project.id
        assert fetched.name == sample_project.name

    def test_repr(self):
        """Test the debug representation."""
        project = Project(id=3, slug="a1b2c3d4e5f6", is_active=False)
        assert repr(project) == "<Project id=3 slug='a1b2c3d4e5f6' active=False>"
