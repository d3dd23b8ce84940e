"""FastAPI dependencies wiring the services to a request-scoped session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.storage.database import get_db
from app.core.storage.gateway import ProjectGateway
from app.services.delivery import DeliveryResolver
from app.services.project_service import ProjectService


def get_gateway(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ProjectGateway:
    return ProjectGateway(db, slug_bytes=settings.slug_bytes)


def get_project_service(
    gateway: ProjectGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
) -> ProjectService:
    return ProjectService(gateway, settings)


def get_delivery_resolver(gateway: ProjectGateway = Depends(get_gateway)) -> DeliveryResolver:
    return DeliveryResolver(gateway)
