"""Error types shared by the store, the API and the CLI."""


class ProjectBoardError(Exception):
    """Base class for ProjectBoard errors."""

    status_code = 500


class ValidationError(ProjectBoardError):
    """Raised when a required project field is missing or empty."""

    status_code = 400


class NotFoundError(ProjectBoardError):
    """Raised when a referenced project row does not exist."""

    status_code = 404


class StoreError(ProjectBoardError):
    """Raised when reading from or writing to the store fails."""

    status_code = 500
