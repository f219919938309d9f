"""
Sign-up controller - Validation pipeline and collaborator delegation.

Pipeline (strictly sequential, every stage may terminate the request):

    ValidatingFields -> ValidatingPasswordMatch -> ValidatingEmail
        -> CreatingAccount -> Success

Outcomes:
- 400 with MissingParamError for the first absent field, in REQUIRED_FIELDS order
- 400 with InvalidParamError("passwordConfirmation") on password mismatch
- 400 with InvalidParamError("email") when the email validator rejects
- 500 with ServerError for any failure result or unexpected exception
- 200 with the created AccountRecord

The whole pipeline runs inside one guarded region, so handle() never raises.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from src.domain.exceptions import CollaboratorFailure
from src.domain.models import AddAccountInput
from src.domain.ports import AddAccount, EmailValidator
from src.domain.result import Failure, Result, attempt
from src.presentation.errors import InvalidParamError, MissingParamError
from src.presentation.http_helper import bad_request, ok, server_error
from src.presentation.protocols import HttpRequest, HttpResponse

T = TypeVar("T")

logger = logging.getLogger(__name__)


def is_missing(value: Any) -> bool:
    """
    Presence rule for required fields.

    Only an absent key, None, or the empty string count as missing.
    Values such as "0", 0 and False are present.
    """
    return value is None or value == ""


@dataclass(frozen=True)
class SignUpController:
    """
    Controller for account sign-up.

    Holds references to its two collaborators and nothing else; every call
    to handle() is independent.
    """

    email_validator: EmailValidator
    add_account: AddAccount

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "email",
        "password",
        "passwordConfirmation",
    )

    def handle(self, request: HttpRequest) -> HttpResponse:
        """
        Run the sign-up pipeline for one request.

        Args:
            request: Request whose body holds name, email, password
                and passwordConfirmation

        Returns:
            HttpResponse with status 200, 400 or 500
        """
        try:
            body = request.body

            missing_field = self.first_missing_field(body)
            if missing_field is not None:
                logger.info("Sign-up rejected: missing %s", missing_field)
                return bad_request(MissingParamError(missing_field))

            name = body["name"]
            email = body["email"]
            password = body["password"]

            if password != body["passwordConfirmation"]:
                logger.info("Sign-up rejected: password confirmation mismatch")
                return bad_request(InvalidParamError("passwordConfirmation"))

            logger.debug("Validating email format")
            email_ok = self._unwrap(
                "email_validator", attempt(self.email_validator.is_valid, email)
            )
            if not email_ok:
                logger.info("Sign-up rejected: invalid email")
                return bad_request(InvalidParamError("email"))

            logger.debug("Creating account")
            account = self._unwrap(
                "add_account",
                attempt(
                    self.add_account.add,
                    AddAccountInput(name=name, email=email, password=password),
                ),
            )
            logger.info("Account created")
            return ok(account)
        except CollaboratorFailure as exc:
            logger.error("Sign-up failed in %s", exc.collaborator, exc_info=exc.cause)
            return server_error()
        except Exception:
            logger.exception("Sign-up failed unexpectedly")
            return server_error()

    @classmethod
    def first_missing_field(cls, body: Mapping[str, Any]) -> str | None:
        """Return the first required field that is missing, or None."""
        for field_name in cls.REQUIRED_FIELDS:
            if is_missing(body.get(field_name)):
                return field_name
        return None

    @staticmethod
    def _unwrap(collaborator: str, result: Result[T]) -> T:
        if isinstance(result, Failure):
            raise CollaboratorFailure(collaborator, result.error)
        return result.value
