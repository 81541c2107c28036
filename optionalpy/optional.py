from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

from .errors import NoValuePresentError
from .function_types import Callback, Consumer, Function, Predicate, Producer
from .object_utils import require_non_null

T = TypeVar("T")
U = TypeVar("U")

NO_VALUE_MESSAGE = "No value present"


class Optional(Generic[T]):
    """A container which may or may not hold a non-None value.

    Instances come from ``Optional.empty()``, ``Optional.of()`` and
    ``Optional.of_nullable()`` only. Falsy values such as ``0``, ``False`` and
    ``""`` are present values; only ``None`` means absence.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Optional[T]":
        if cls is Optional:
            raise TypeError("use Optional.empty(), Optional.of() or Optional.of_nullable()")
        return super().__new__(cls)

    @staticmethod
    def empty() -> "Optional[T]":
        return EMPTY  # type: ignore[return-value]

    @staticmethod
    def of(value: T) -> "Optional[T]":
        return _Present(require_non_null(value))

    @staticmethod
    def of_nullable(value: T | None) -> "Optional[T]":
        return EMPTY if value is None else Optional.of(value)  # type: ignore[return-value]

    def is_present(self) -> bool: raise NotImplementedError
    def is_empty(self) -> bool: return not self.is_present()

    def get(self) -> T:
        if self.is_empty():
            raise NoValuePresentError(NO_VALUE_MESSAGE)
        return self.value  # type: ignore[attr-defined]

    def if_present(self, consumer: Consumer[T]) -> None:
        if self.is_present():
            consumer(self.value)  # type: ignore[attr-defined]

    def if_present_or_else(self, action: Consumer[T], empty_action: Callback) -> None:
        if self.is_present():
            action(self.value)  # type: ignore[attr-defined]
        else:
            empty_action()

    def tap(self, consumer: Consumer[T]) -> "Optional[T]":
        self.if_present(consumer)
        return self

    def filter(self, predicate: Predicate[T]) -> "Optional[T]":
        require_non_null(predicate)
        if self.is_empty():
            return self
        return self if predicate(self.value) else Optional.empty()  # type: ignore[attr-defined]

    def map(self, mapper: Function[T, U | None]) -> "Optional[U]":
        """Apply ``mapper`` to a present value.

        A ``None`` result collapses to an empty Optional, so chains like
        ``Optional.of_nullable(resp).map(lambda r: r.body).or_else("")``
        need no intermediate checks.
        """
        require_non_null(mapper)
        if self.is_empty():
            return Optional.empty()
        return Optional.of_nullable(mapper(self.value))  # type: ignore[attr-defined]

    def flat_map(self, mapper: Function[T, "Optional[U]"]) -> "Optional[U]":
        require_non_null(mapper)
        if self.is_empty():
            return Optional.empty()
        return require_non_null(mapper(self.value))  # type: ignore[attr-defined]

    def or_else(self, other: U) -> T | U:
        return self.value if self.is_present() else other  # type: ignore[attr-defined]

    def or_else_get(self, producer: Producer[U]) -> T | U:
        return self.value if self.is_present() else producer()  # type: ignore[attr-defined]

    def or_else_raise(self, error_supplier: Producer[BaseException]) -> T:
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        raise error_supplier()

    def equals(self, other: object) -> bool:
        """Compare contained values with ``==``.

        Containers compare by content, so ``Optional.of([1])`` equals another
        ``Optional.of([1])``; hashing such an Optional raises ``TypeError``
        like hashing the list itself.
        """
        if self is other:
            return True
        if not isinstance(other, Optional):
            return False
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return bool(self.value == other.value)  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((Optional, self.value)) if self.is_present() else hash(Optional)  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.value  # type: ignore[attr-defined]


@dataclass(frozen=True, eq=False)
class _Present(Optional[T]):
    value: T
    def __repr__(self) -> str: return f"Optional[{self.value!r}]"
    def is_present(self) -> bool: return True


class _Empty(Optional[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "Optional.empty"
    def is_present(self) -> bool: return False


EMPTY: Optional[Any] = _Empty()
