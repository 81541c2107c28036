from __future__ import annotations
from typing import Optional


def is_null_or_empty(s: Optional[str]) -> bool:
    return s is None or len(s) == 0


def is_not_null_or_empty(s: Optional[str]) -> bool:
    return not is_null_or_empty(s)
