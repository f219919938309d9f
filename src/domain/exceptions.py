"""
Domain exceptions - Internal failure types for the sign-up flow.

These never cross the controller boundary; the controller converts them
to a generic server error response.
"""


class SignUpError(Exception):
    """Base class for sign-up domain errors."""

    pass


class CollaboratorFailure(SignUpError):
    """An injected collaborator raised instead of returning a result."""

    def __init__(self, collaborator: str, cause: Exception) -> None:
        super().__init__(f"{collaborator} failed")
        self.collaborator = collaborator
        self.cause = cause
