"""Page container returned by paged repository queries."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One ordered slice of a collection plus navigation metadata."""

    items: Sequence[T]
    total_count: int
    current_page: int
    page_size: int

    def __post_init__(self) -> None:
        if self.current_page < 1:
            msg = "current_page must be at least 1."
            raise ValueError(msg)
        if self.page_size < 1:
            msg = "page_size must be at least 1."
            raise ValueError(msg)
        if self.total_count < 0:
            msg = "total_count must be non-negative."
            raise ValueError(msg)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold ``total_count`` items."""
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
