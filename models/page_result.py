# -*- coding: utf-8 -*-
"""
Paged result container.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, TypeVar

T = TypeVar('T')


@dataclass
class PageResult(Generic[T]):
    """One page of a larger result set with server-reported totals."""

    items: List[T] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 0
    current_page: int = 1

    @classmethod
    def from_response(
        cls,
        payload: Dict[str, Any],
        item_factory: Callable[[Dict[str, Any]], T],
        requested_page: int = 1
    ) -> "PageResult[T]":
        """
        Build a page from a `{data: [...], pagination: {...}}` response.

        Totals are taken as reported; a missing pagination block falls back
        to a single page holding the returned items.
        """
        rows = payload.get("data") or []
        items = [item_factory(row) for row in rows]
        pagination = payload.get("pagination") or {}

        return cls(
            items=items,
            total_items=int(pagination.get("totalItems", len(items))),
            total_pages=int(pagination.get("totalPages", 1 if items else 0)),
            current_page=int(pagination.get("currentPage", requested_page)),
        )

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1
