"""
Domain models - Account data carried between the controller and AddAccount.

Plain frozen dataclasses; persistence of AccountRecord belongs to whoever
implements the AddAccount port.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountInput:
    """Data needed to create an account. Never carries the password confirmation."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AccountRecord:
    """Account as returned by the AddAccount collaborator."""

    id: str
    name: str
    email: str
    password: str
