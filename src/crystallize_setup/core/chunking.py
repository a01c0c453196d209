"""Pure batch-splitting helper.

Import scripts use this to send mutations in fixed-size batches.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def chunk_array(items: Sequence[T], size: int) -> list[list[T]]:
    """Split *items* into consecutive batches of at most *size* elements.

    Order is preserved and only the final batch may be shorter.  Every
    element is kept, including falsy ones such as ``0`` or ``None``.

    Raises
    ------
    ValueError
        If *size* is smaller than 1.
    """
    if size < 1:
        raise ValueError(f"Batch size must be a positive integer, got {size}")
    return [list(items[start:start + size]) for start in range(0, len(items), size)]
