"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Collaborator stubs (email validator, account creation)
- A wired SignUpController
- A fully valid sign-up request
"""

from unittest.mock import Mock

import pytest

from src.domain.models import AccountRecord, AddAccountInput
from src.domain.ports import AddAccount, EmailValidator
from src.presentation.controllers.signup import SignUpController
from src.presentation.protocols import HttpRequest


class EmailValidatorStub:
    """Accepts every email."""

    def is_valid(self, email: str) -> bool:
        return True


class AddAccountStub:
    """Returns a fixed account for any input."""

    def add(self, account: AddAccountInput) -> AccountRecord:
        return AccountRecord(
            id="valid_id",
            name="valid_name",
            email="valid_email@mail.com",
            password="valid_password",
        )


@pytest.fixture
def email_validator() -> Mock:
    """Spy wrapping an always-valid email validator."""
    return Mock(spec=EmailValidator, wraps=EmailValidatorStub())


@pytest.fixture
def add_account() -> Mock:
    """Spy wrapping an account creator that returns a fixed record."""
    return Mock(spec=AddAccount, wraps=AddAccountStub())


@pytest.fixture
def controller(email_validator: Mock, add_account: Mock) -> SignUpController:
    return SignUpController(email_validator=email_validator, add_account=add_account)


@pytest.fixture
def valid_body() -> dict[str, str]:
    return {
        "name": "any_name",
        "email": "any_email@mail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }


@pytest.fixture
def valid_request(valid_body: dict[str, str]) -> HttpRequest:
    return HttpRequest(body=valid_body)
