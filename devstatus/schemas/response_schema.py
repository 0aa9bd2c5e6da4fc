"""JSON envelopes for the health endpoints.

Every body carries the HTTP ``status`` and a ``message``. Success bodies add
the endpoint payload under ``data``; error bodies add the failure ``code``.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

from devstatus.core.mode import RuntimeMode

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class Envelope(BaseModel):
    status: int = 200
    message: str = "Success"


class ErrorResponse(Envelope):
    """Body written by the ``AppException`` handler."""

    code: str


class ApiResponse(Envelope, Generic[PayloadT]):
    data: PayloadT | None = None


class ServiceHealth(BaseModel):
    """Liveness payload: the service answers and reports its mode."""

    status: Literal["healthy"] = "healthy"
    environment: RuntimeMode


def success_response(payload: BaseModel) -> dict:
    """Wrap a payload model in the 200 envelope."""
    return {**Envelope().model_dump(), "data": payload.model_dump(mode="json")}
