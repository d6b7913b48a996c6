"""
Error types shared by the collector, the reporters and the API client.

Each error kind maps to a distinct process exit code used by the runner.
"""

from typing import Any, Optional


class ReportError(Exception):
    """Base class for all pipeline errors."""

    exit_code = 1


class FetchError(ReportError):
    """Pagination failed; no report is written."""

    exit_code = 2

    def __init__(self, page: int, message: str, status_code: Optional[int] = None) -> None:
        self.page = page
        self.status_code = status_code
        super().__init__(f"API error on page {page}: {message}")


class WriteError(ReportError):
    """A report file could not be written."""

    exit_code = 3

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to write report {path}: {message}")


class ApiError(ReportError):
    """A create/update/delete call returned a non-success status."""

    exit_code = 4

    def __init__(
        self,
        action: str,
        status_code: int,
        reason: str = "",
        body: Optional[Any] = None,
    ) -> None:
        self.action = action
        self.status_code = status_code
        self.reason = reason
        self.body = body if body is not None else {}
        super().__init__(f"Failed to {action}: {status_code} {reason}. {self.body}")
