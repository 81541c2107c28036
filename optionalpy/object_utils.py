from __future__ import annotations
from typing import Any, Optional, TypeVar

from .errors import NullArgumentError
from .string_utils import is_not_null_or_empty, is_null_or_empty

T = TypeVar("T")

DEFAULT_NULL_MESSAGE = "nullable argument"
DEFAULT_EMPTY_MESSAGE = "nullable or empty argument"


def is_null_or_undefined(value: Any) -> bool:
    return value is None


def is_not_null_or_undefined(value: Any) -> bool:
    return not is_null_or_undefined(value)


def require_non_null(value: Optional[T], message: Optional[str] = None) -> T:
    """Return ``value`` unchanged, or raise ``NullArgumentError`` if it is None.

    An empty ``message`` counts as absent and the default message is used.
    """
    if is_null_or_undefined(value):
        raise NullArgumentError(message if is_not_null_or_empty(message) else DEFAULT_NULL_MESSAGE)
    return value  # type: ignore[return-value]


def require_non_empty(s: Optional[str], message: Optional[str] = None) -> str:
    if is_null_or_empty(s):
        raise NullArgumentError(message if is_not_null_or_empty(message) else DEFAULT_EMPTY_MESSAGE)
    return s  # type: ignore[return-value]
