from dataclasses import dataclass
from typing import Any, Generic, List, Tuple, TypeVar

T = TypeVar("T")

@dataclass(slots=True)
class PageDTO(Generic[T]):
    """Generic pagination envelope."""
    data: List[T]
    total: int
    total_pages: int
    page: int
    page_size: int
    has_next: bool
    has_prev: bool

@dataclass(slots=True, frozen=True)
class QuerySpec:
    """
    One list request, ready to run.

    ``base_query`` is the filtered, ordered, unwindowed SELECT; ``count_query``
    counts the same filtered set into a column named ``count``. Both bind the
    same positional ``params``.
    """
    base_query: str
    count_query: str
    params: Tuple[Any, ...] = ()
    page: int = 1
    page_size: int = 10
    show_all: bool = False
