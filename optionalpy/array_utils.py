from __future__ import annotations
from typing import Optional, Sized


def is_null_or_empty_array(seq: Optional[Sized]) -> bool:
    return seq is None or len(seq) == 0


def is_not_null_or_empty_array(seq: Optional[Sized]) -> bool:
    return not is_null_or_empty_array(seq)
