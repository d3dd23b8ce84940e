"""Tests for File database model."""

import pytest
from datetime import datetime
from sqlalchemy import exc as sa_exc
from sqlalchemy import select

from app.models.database import File


@pytest.mark.unit
class TestFileModel:
    """Test cases for the File model."""

    @pytest.mark.asyncio
    async def test_create_file(self, db_session, sample_project):
        """Test creating a new file record."""
        file = File(
            project_id=sample_project.id,
            filename="file_1700000000000.html",
            original_name="page.html",
            content="<h1>page</h1>",
            size=13,
        )
        db_session.add(file)
        await db_session.commit()
        await db_session.refresh(file)

        assert isinstance(file.id, int)
        assert file.project_id == sample_project.id
        assert file.filename == "file_1700000000000.html"
        assert file.original_name == "page.html"
        assert file.content == "<h1>page</h1>"
        assert file.size == 13
        assert isinstance(file.uploaded_at, datetime)

    @pytest.mark.asyncio
    async def test_file_requires_project(self, db_session):
        """Test that project_id is mandatory."""
        file = File(filename="f.html", original_name="f.html", content="x", size=1)
        db_session.add(file)

        with pytest.raises(sa_exc.IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    @pytest.mark.asyncio
    async def test_file_rejects_unknown_project(self, db_session):
        """Test that foreign keys are enforced."""
        file = File(project_id=4242, filename="f.html", original_name="f.html", content="x", size=1)
        db_session.add(file)

        with pytest.raises(sa_exc.IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    @pytest.mark.asyncio
    async def test_storage_filename_not_unique(self, db_session, sample_project):
        """Test that several files may share a storage filename."""
        for _ in range(2):
            db_session.add(
                File(
                    project_id=sample_project.id,
                    filename="file_1700000000000.html",
                    original_name="dup.html",
                    content="x",
                    size=1,
                )
            )
        await db_session.commit()

        result = await db_session.execute(
            select(File).where(File.filename == "file_1700000000000.html")
        )
        assert len(result.scalars().all()) == 3
