"""Domain exceptions for the team builder.

Every error a request handler can hit derives from ``TeamBuilderError`` and
carries the HTTP status it maps to. ``main`` registers one handler that turns
them into ``{"success": false, "error": ...}`` bodies.
"""


class TeamBuilderError(Exception):
    """Base exception for the team builder."""

    status_code: int = 500
    error_code: str = "TEAM_BUILDER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(TeamBuilderError):
    """A required field is missing from the request payload."""

    status_code = 400
    error_code = "INVALID_INPUT"


class NotFound(TeamBuilderError):
    """No team exists for the requested id."""

    status_code = 404
    error_code = "NOT_FOUND"


class IdExhausted(TeamBuilderError):
    """Every generated team id collided with an existing one."""

    status_code = 500
    error_code = "ID_EXHAUSTED"


class StoreFailure(TeamBuilderError):
    """The team store failed for a reason other than an id collision."""

    status_code = 500
    error_code = "STORE_FAILURE"


class CatalogReadFailure(TeamBuilderError):
    """Hero definitions or assets could not be read."""

    status_code = 500
    error_code = "CATALOG_READ_FAILURE"


class TeamIdCollision(Exception):
    """A candidate team id is already taken. Internal to the save retry loop."""

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"Team id already exists: {team_id}")
