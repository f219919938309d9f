"""
Port interfaces - Protocol definitions for the sign-up collaborators.

This module defines the two capabilities the sign-up controller needs
from the outside world. Adapters implement these protocols structurally;
their lifecycle is owned by the composition step, not by the controller.
"""

from typing import Protocol

from .models import AccountRecord, AddAccountInput


class EmailValidator(Protocol):
    """Port interface for email syntax validation."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether an email address is syntactically valid.

        Args:
            email: Email address exactly as received in the request

        Returns:
            True if the address is acceptable, False otherwise

        Implementations may raise on unexpected failure; callers must
        contain it.
        """
        ...


class AddAccount(Protocol):
    """Port interface for account creation."""

    def add(self, account: AddAccountInput) -> AccountRecord:
        """
        Create an account from validated sign-up data.

        Args:
            account: Name, email and password of the new account

        Returns:
            The created AccountRecord

        Implementations may raise on unexpected failure; callers must
        contain it.
        """
        ...
