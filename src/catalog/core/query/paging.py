"""Filter, sort and paginate an in-memory snapshot of records.

The stages always run in this order:

1. filter: keep records accepted by ``matches(record, term)`` when the search
   term is not blank,
2. sort: stable sort on the key selected by ``sort_column``, reversed when
   ``sort_order`` is ``desc``,
3. count: ``total_count`` is taken after filtering and before paging,
4. page: skip ``(page - 1) * page_size`` records and take ``page_size``.

Nothing here touches the store, so the pipeline can run concurrently over the
same snapshot.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

SortKey = Callable[[Any], Any]

DEFAULT_SORT_COLUMN = "id"
DESCENDING = "desc"


class PageRequest(BaseModel):
    """Search, sort and paging options for a list query."""

    search: str | None = Field(default=None, description="Substring to look for")
    sort_column: str | None = Field(
        default=DEFAULT_SORT_COLUMN, description="Column to sort by"
    )
    sort_order: str | None = Field(default="asc", description="asc or desc")
    page: int = Field(default=1, ge=1, description="1-based page number")
    page_size: int = Field(default=10, ge=1, description="Maximum items per page")

    @property
    def search_term(self) -> str | None:
        """The search term, or None when it is empty or whitespace only."""
        if self.search is None or not self.search.strip():
            return None
        return self.search

    @property
    def descending(self) -> bool:
        return (self.sort_order or "").lower() == DESCENDING

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PageResult(BaseModel, Generic[T]):
    """Page envelope: one slice of results plus the filtered total."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T]
    total_count: int
    page: int
    page_size: int


def resolve_sort_key(
    sort_keys: Mapping[str, SortKey], sort_column: str | None
) -> SortKey:
    """Pick the key extractor for a column, falling back to the id extractor."""
    column = (sort_column or DEFAULT_SORT_COLUMN).lower()
    return sort_keys.get(column, sort_keys[DEFAULT_SORT_COLUMN])


def run_page_query(
    records: Iterable[T],
    request: PageRequest,
    *,
    sort_keys: Mapping[str, SortKey],
    matches: Callable[[T, str], bool],
) -> PageResult[T]:
    """Build one page of ``records`` according to ``request``.

    ``records`` must already be in primary-key order; ties on the sort key
    keep that order in both directions.
    """
    term = request.search_term
    filtered = [r for r in records if matches(r, term)] if term else list(records)

    # sorted(reverse=True) is still stable for equal keys
    ordered = sorted(
        filtered,
        key=resolve_sort_key(sort_keys, request.sort_column),
        reverse=request.descending,
    )

    start = request.offset
    return PageResult(
        items=ordered[start:start + request.page_size],
        total_count=len(ordered),
        page=request.page,
        page_size=request.page_size,
    )
