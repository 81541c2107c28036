from __future__ import annotations
from typing import Callable, TypeVar

T = TypeVar("T")
R = TypeVar("R")

# Consumes a value and returns nothing
Consumer = Callable[[T], None]
Producer = Callable[[], T]
# Takes no arguments and returns nothing
Callback = Callable[[], None]
Predicate = Callable[[T], bool]
Function = Callable[[T], R]


def nop_callback() -> None:
    return None
