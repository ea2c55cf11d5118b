"""Tool result types and failure logging."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger("sqlgate.tools")


class ErrorType(enum.Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATABASE_CONNECTION_ERROR = "DATABASE_CONNECTION_ERROR"
    QUERY_EXECUTION_ERROR = "QUERY_EXECUTION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class ToolFailure:
    """Error result returned to the agent instead of rows."""

    error_type: ErrorType
    message: str
    details: object | None = None

    def to_dict(self) -> dict[str, object]:
        return {"type": self.error_type.value, "message": self.message}


def log_failure(failure: ToolFailure) -> None:
    logger.error("[%s] %s", failure.error_type.value, failure.message)
    if failure.details is not None:
        logger.debug("Details: %r", failure.details)
