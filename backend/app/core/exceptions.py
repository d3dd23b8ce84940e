"""Error kinds raised by the project core.

The HTTP layer maps each kind to a status code in ``app.api.errors``.
"""


class ProjectError(Exception):
    """Base exception for project operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(ProjectError):
    """Raised when upload parameters fail validation."""

    pass


class NotFoundError(ProjectError):
    """Raised when a slug, or the content behind it, does not exist."""

    pass


class ForbiddenError(ProjectError):
    """Raised when content of a deactivated project is requested."""

    pass


class IntegrityError(ProjectError):
    """Raised when a project could not be stored together with its file."""

    def __init__(self, slug: str, message: str | None = None):
        self.slug = slug
        super().__init__(message or f"Project '{slug}' was created without a file")


class StorageUnavailableError(ProjectError):
    """Raised when the datastore cannot complete an operation."""

    def __init__(self, operation: str, message: str | None = None):
        self.operation = operation
        super().__init__(message or f"Storage unavailable during '{operation}'")


class SlugCollisionError(ProjectError):
    """Raised when a generated slug is already taken."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug '{slug}' already exists")
