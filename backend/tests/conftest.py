"""Shared test fixtures."""

import io

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.datastructures import UploadFile

from app.core.config import Settings
from app.core.storage.database import Base, create_db_engine, get_db
from app.core.storage.gateway import ProjectGateway
from app.models.database import File, Project
from app.services.delivery import DeliveryResolver
from app.services.project_service import ProjectService

SAMPLE_HTML = b"<html><body><h1>Hello</h1></body></html>"


def build_upload(filename: str = "index.html", data: bytes = SAMPLE_HTML) -> UploadFile:
    """Build an UploadFile the way Starlette does for multipart requests."""
    return UploadFile(file=io.BytesIO(data), filename=filename, size=len(data))


@pytest.fixture
def make_upload():
    """Factory for in-memory HTML uploads."""
    return build_upload


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def db_engine():
    """In-memory SQLite engine with all tables created."""
    import app.models.database  # noqa: F401

    engine = create_db_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Database session bound to the in-memory engine."""
    async_session_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session_maker() as session:
        yield session


@pytest.fixture
def gateway(db_session, test_settings) -> ProjectGateway:
    return ProjectGateway(db_session, slug_bytes=test_settings.slug_bytes)


@pytest.fixture
def project_service(gateway, test_settings) -> ProjectService:
    return ProjectService(gateway, test_settings)


@pytest.fixture
def delivery_resolver(gateway) -> DeliveryResolver:
    return DeliveryResolver(gateway)


@pytest.fixture
async def sample_project(db_session) -> Project:
    """An active project with one stored file."""
    project = Project(slug="a1b2c3d4e5f6", name="Sample", entry_point="index.html")
    db_session.add(project)
    await db_session.flush()
    db_session.add(
        File(
            project_id=project.id,
            filename="file_1700000000000.html",
            original_name="index.html",
            content=SAMPLE_HTML.decode(),
            size=len(SAMPLE_HTML),
        )
    )
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest.fixture
async def client(db_engine):
    """Async client for the full application backed by the in-memory database."""
    from app.main import app

    session_maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def get_test_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
