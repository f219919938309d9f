"""
Response builders - Map sign-up outcomes to HttpResponse values.
"""

from typing import Any

from .errors import InvalidParamError, MissingParamError, ServerError
from .protocols import HttpResponse


def bad_request(error: MissingParamError | InvalidParamError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)
