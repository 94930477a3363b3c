"""
Violet API Backend - Outcome Envelope
======================================

What:  The value every endpoint handler returns: either a `Success` carrying a
       payload or a `Failure` carrying a structured error, both with the HTTP
       status code the response should use.
Why:   One uniform return shape lets the route proxy write every response the
       same way, and keeps expected failures (not found, invalid input) out of
       the exception path.
How:   Two frozen dataclasses joined in the `Outcome` union. Use the `ok()` and
       `fail()` factories in handler code.

Usage:
    async def get_client(request, response) -> Outcome:
        client = catalogue.get(request.path_params["clientId"])
        if client is None:
            return fail(NotFoundError("client", client_id))
        return ok(client)
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from violet.exceptions import VioletError


class InvalidOutcomeError(VioletError):
    default_message = "A failing Outcome needs to contain an error."


@dataclass(frozen=True)
class Success:
    status_code: int
    value: Any = None

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get_value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Failure:
    status_code: int
    error: Any

    def __post_init__(self):
        if self.error is None:
            raise InvalidOutcomeError()

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get_value(self) -> Any:
        return self.error


Outcome = Union[Success, Failure]


def ok(value: Any = None, status_code: int = 200) -> Success:
    return Success(status_code=status_code, value=value)


def fail(error: Any, status_code: Optional[int] = None) -> Failure:
    """
    Build a Failure, taking the status code from the error when not given.

    VioletError subclasses carry their own status code (404 for NotFoundError,
    400 for ValidationError, ...). Anything else defaults to 500.
    """
    if status_code is None:
        status_code = getattr(error, "status_code", None)
        if not isinstance(status_code, int):
            status_code = 500
    return Failure(status_code=status_code, error=error)
