"""
Domain layer - Pure sign-up types with zero framework imports.

Defines the account models, the collaborator ports the controller depends
on, and the explicit result type used at every collaborator call site.
"""

from .exceptions import CollaboratorFailure, SignUpError
from .models import AccountRecord, AddAccountInput
from .ports import AddAccount, EmailValidator
from .result import Failure, Result, Success, attempt

__all__ = [
    "AccountRecord",
    "AddAccount",
    "AddAccountInput",
    "CollaboratorFailure",
    "EmailValidator",
    "Failure",
    "Result",
    "SignUpError",
    "Success",
    "attempt",
]
