"""
Presentation protocols - Request/response models and the Controller port.

Pydantic models give the transport-agnostic request and response a
validated shape; any transport adapter maps onto them.
"""

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class HttpRequest(BaseModel):
    """Incoming request. Body values are untrusted and not coerced."""

    body: dict[str, Any] = Field(default_factory=dict)


class HttpResponse(BaseModel):
    """Outgoing response: status code plus an arbitrary body."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Any = None


class Controller(Protocol):
    """Port interface for request handlers."""

    def handle(self, request: HttpRequest) -> HttpResponse:
        """Handle a request and always return a response."""
        ...
