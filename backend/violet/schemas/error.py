"""
Violet API Backend - Error Response Schema
===========================================

What:  Wire shape of every error body written by the global exception
       handlers, so clients parse one format whatever failed.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from violet.exceptions import VioletError


class ErrorResponse(BaseModel):
    error: str = Field(description="Error type tag, e.g. NotFoundError")
    message: str = Field(description="User-facing explanation")
    detail: Optional[str] = Field(default=None, description="Developer-facing detail")
    solution: Optional[str] = Field(default=None, description="Suggested action")
    request_id: str = Field(default="", description="X-Request-ID of the failed request")

    @classmethod
    def from_error(cls, exc: VioletError, request_id: str = "") -> "ErrorResponse":
        return cls(**exc.to_dict(), request_id=request_id)

    def body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
