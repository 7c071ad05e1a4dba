"""Error types raised around statement execution.

Every error carries a message and an optional structured ``data`` payload.
The kind of error is a closed set (`ErrorKind`), fixed by each subclass, so
callers can branch either on the class or on ``error.kind``.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of error kinds."""

    GENERAL = "general"
    NOT_FOUND = "not_found"
    CONSTRAINT = "constraint"


class QueryRunnerError(Exception):
    """Base error carrying a message and optional structured data.

    Attributes:
        message: Human readable description.
        data: Optional structured payload describing the failure.
        kind: The error kind.
    """

    kind: ErrorKind = ErrorKind.GENERAL
    default_message = "query runner error"

    def __init__(self, message: str | None = None, data: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a serializable dictionary."""
        return {"kind": self.kind.value, "message": self.message, "data": self.data}


class NotFoundError(QueryRunnerError):
    """Raised by higher-level collaborators when an entity is not found."""

    kind = ErrorKind.NOT_FOUND
    default_message = "not found error"


class ConstraintError(QueryRunnerError):
    """General constraint error."""

    kind = ErrorKind.CONSTRAINT
    default_message = "constraint error"
