"""
Violet API Backend - Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Every error in the project carries the same structure: a status code
       class, a type tag, a user-facing message and optional developer detail,
       so logs and response bodies look alike no matter where it was raised.
How:   Each exception class carries a message, an optional context dict and
       class-level defaults for status code, detail and solution.
       Global exception handlers (registered in main.py) and the route proxy
       turn them into structured JSON error responses.

Exception Hierarchy:
    VioletError (base)                 → 500 Internal Server Error
    ├── ValidationError                → 400 Bad Request
    ├── NotFoundError                  → 404 Not Found
    ├── RateLimitExceededError         → 429 Too Many Requests
    └── RouteError (violet.routing.errors)
        └── registration / activation / request-time routing failures

Design Decision:
    Routing errors are mostly *logged*, not raised: registration code reports
    problems through the logger and carries on. Handlers report expected
    failures by returning `fail(error)` and reserve raising for the
    unexpected.
"""

from typing import Any, Dict, Optional


class VioletError(Exception):
    """
    Base exception for all Violet application errors.

    Attributes:
        message:     User-facing error description (safe to return in API response)
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status code used when the error becomes a response
        detail:      Developer-oriented explanation of what went wrong
        solution:    Suggested action to resolve the error
        cause:       Underlying exception, if any (never returned to client)
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"
    detail: Optional[str] = None
    solution: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        self.cause = cause
        super().__init__(self.message)

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Response body representation. Context and cause stay server-side."""
        body: Dict[str, Any] = {
            "error": self.error_type,
            "message": self.message,
        }
        if self.detail:
            body["detail"] = self.detail
        if self.solution:
            body["solution"] = self.solution
        return body

    def __str__(self) -> str:
        text = f"[{self.error_type}] {self.message}"
        if self.detail:
            text += f" {self.detail}"
        if self.cause is not None:
            text += f" (caused by {type(self.cause).__name__}: {self.cause})"
        return text


class ValidationError(VioletError):
    """
    Raised or returned when client input fails a business rule.

    HTTP:    400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(VioletError):
    """
    The client asked for something that doesn't exist.

    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class RateLimitExceededError(VioletError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests (with Retry-After header)
    """

    status_code = 429

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
