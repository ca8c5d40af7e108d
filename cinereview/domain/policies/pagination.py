# cinereview/domain/policies/pagination.py
from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from cinereview.domain.dataclasses.paging import Page, PageRequest

T = TypeVar("T")


def build_page(items: Sequence[T], total: int, req: PageRequest) -> Page[T]:
    """
    Wrap an already-sliced window (e.g. a store LIMIT/OFFSET result) with the
    page metadata for `total` matching records.
    """
    total = max(0, int(total))
    start, end = req.offset, req.end
    window: List[T] = list(items)[: req.limit] if start < total else []
    return Page(
        items=window,
        current_page=req.page,
        limit=req.limit,
        total_pages=math.ceil(total / req.limit),
        total_count=total,
        has_next_page=end < total,
        has_prev_page=start > 0,
    )


def paginate(seq: Sequence[T], req: PageRequest) -> Page[T]:
    """Slice a fully-materialized, already-ordered sequence to one page."""
    return build_page(seq[req.offset:req.end], len(seq), req)
