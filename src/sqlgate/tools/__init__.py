"""Agent-facing tools: guarded SELECT execution and schema browsing."""

from sqlgate.tools._types import ErrorType, ToolFailure, log_failure
from sqlgate.tools.schema import schema_tool
from sqlgate.tools.select import select_tool

__all__ = [
    "ErrorType",
    "ToolFailure",
    "log_failure",
    "schema_tool",
    "select_tool",
]
