"""
Custom exception hierarchy for centralized error handling.
All exceptions map to appropriate HTTP status codes.

Two kinds escape the service layer:
- UpstreamError: the legacy API failed (transport, non-2xx, bad payload,
  retries exhausted). Rendered with a fixed message and a source marker.
- ServiceError: any other defect while orchestrating cache/transform.
"""
from typing import Any, Dict, Optional, Union

UPSTREAM_SOURCE = "legacy-api"
UPSTREAM_PUBLIC_MESSAGE = (
    "Legacy system is temporarily unavailable. Please try again later."
)


class AppException(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            },
        }


class UpstreamError(AppException):
    """
    The legacy API could not serve a read.

    ``message`` is descriptive (endpoint + underlying failure) and is meant
    for logs; ``to_dict`` never echoes it to callers.
    """

    is_upstream_failure = True

    def __init__(
        self,
        message: str,
        endpoint: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="LEGACY_UNAVAILABLE",
        )
        self.endpoint = endpoint
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": UPSTREAM_PUBLIC_MESSAGE,
                "details": {},
            },
            "source": UPSTREAM_SOURCE,
        }


class ServiceError(AppException):
    """Unexpected failure while serving a resource read."""

    is_upstream_failure = False

    def __init__(
        self,
        operation: str,
        reason: str = "Unknown error",
        resource_id: Optional[Union[str, int]] = None,
    ) -> None:
        details: Dict[str, Any] = {"operation": operation}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(
            message=f"Failed to {operation}: {reason}",
            status_code=500,
            error_code="SERVICE_ERROR",
            details=details,
        )
        self.operation = operation
        self.resource_id = resource_id
