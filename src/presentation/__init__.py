"""
Presentation layer - Sign-up controller and its response contract.
"""

from .errors import InvalidParamError, MissingParamError, ServerError
from .http_helper import bad_request, ok, server_error
from .protocols import Controller, HttpRequest, HttpResponse
from .controllers.signup import SignUpController

__all__ = [
    "Controller",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "ServerError",
    "SignUpController",
    "bad_request",
    "ok",
    "server_error",
]
