"""Resolve a public slug to servable HTML."""

from dataclasses import dataclass

import structlog

from app.core.exceptions import ForbiddenError, NotFoundError
from app.core.storage.gateway import ProjectGateway

logger = structlog.get_logger(__name__)

HTML_MEDIA_TYPE = "text/html; charset=utf-8"
NO_CACHE = "no-cache"


@dataclass(frozen=True)
class DeliveredContent:
    content: str
    media_type: str = HTML_MEDIA_TYPE
    cache_control: str = NO_CACHE


class DeliveryResolver:
    """Look up a project's content for serving.

    Checks run in a fixed order: the project must exist, then be active, then
    have a file. An inactive project is rejected before its files are queried.
    """

    def __init__(self, gateway: ProjectGateway):
        self.gateway = gateway

    async def resolve(self, slug: str) -> DeliveredContent:
        project = await self.gateway.find_project_by_slug(slug)
        if project is None:
            raise NotFoundError("Project not found")

        if not project.is_active:
            logger.info("inactive_project_requested", slug=slug)
            raise ForbiddenError("Project is deactivated")

        file = await self.gateway.find_first_file_by_project(project.id)
        if file is None:
            logger.warning("project_without_file", slug=slug, project_id=project.id)
            raise NotFoundError("Project file not found")

        return DeliveredContent(content=file.content)
