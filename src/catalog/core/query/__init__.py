"""Paged query pipeline."""

from .paging import PageRequest, PageResult, SortKey, run_page_query

__all__ = ["PageRequest", "PageResult", "SortKey", "run_page_query"]
