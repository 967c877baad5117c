# newsdesk/core/errors.py

from typing import Any


# -------------------------------
# Domain Errors
# -------------------------------

class NewsdeskError(Exception):
    """
    Base class for errors raised by the services.
    Each subclass carries the HTTP status and the stable message the
    frontend relies on. `detail` holds optional diagnostics.
    """
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None, detail: Any = None):
        self.message = message or self.message
        self.detail = detail
        super().__init__(self.message)


class InvalidInput(NewsdeskError):
    status_code = 400
    message = "Invalid input"


class Conflict(NewsdeskError):
    status_code = 409
    message = "Already exists"


class InvalidCredentials(NewsdeskError):
    status_code = 401
    message = "Invalid username or password"


class Unauthorized(NewsdeskError):
    status_code = 401
    message = "Could not validate credentials"


class NotFound(NewsdeskError):
    status_code = 404
    message = "Not found"


class StoreFailure(NewsdeskError):
    status_code = 500
    message = "Internal server error"


class UpstreamFailure(NewsdeskError):
    """Only used inside the news gateway; always turned into an envelope."""
    status_code = 500
    message = "Failed to fetch data from the API"

    def __init__(self, message: str | None = None, detail: Any = None, status_code: int | None = None):
        super().__init__(message, detail)
        if status_code:
            self.status_code = status_code
