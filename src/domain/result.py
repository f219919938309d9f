"""
Call results - explicit success/failure values for collaborator calls.

Collaborators are allowed to raise. attempt() turns whatever happens during
a call into a value so the caller decides what a failure means.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Collaborator returned normally."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Collaborator raised; the exception is kept for logging only."""

    error: Exception


Result = Union[Success[T], Failure]


def attempt(operation: Callable[..., T], *args: Any) -> "Result[T]":
    """
    Invoke operation with args and capture the outcome.

    Returns:
        Success wrapping the return value, or Failure wrapping the exception
    """
    try:
        return Success(operation(*args))
    except Exception as exc:
        logger.debug("Call to %r raised %s", operation, type(exc).__name__)
        return Failure(exc)
