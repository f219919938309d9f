"""
Error value objects - Response bodies for rejected sign-up requests.

These are values, not exceptions: the controller returns them inside a
response and never raises them. Frozen pydantic models, so two errors for
the same parameter compare equal and serialize with model_dump().
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, computed_field

SERVER_ERROR_MESSAGE = "Internal server error"


class ParamError(BaseModel):
    """Base for errors attributed to a single request field."""

    model_config = ConfigDict(frozen=True)

    message_prefix: ClassVar[str] = ""

    param_name: str

    def __init__(self, param_name: str, **data: object) -> None:
        super().__init__(param_name=param_name, **data)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return type(self).__name__

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return f"{self.message_prefix}: {self.param_name}"


class MissingParamError(ParamError):
    """A required request field is absent or empty."""

    message_prefix: ClassVar[str] = "Missing param"


class InvalidParamError(ParamError):
    """A request field is present but fails a business rule."""

    message_prefix: ClassVar[str] = "Invalid param"


class ServerError(BaseModel):
    """Generic internal failure. Carries no detail from the original error."""

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return "ServerError"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return SERVER_ERROR_MESSAGE
