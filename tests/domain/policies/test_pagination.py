import math

import pytest

from cinereview.domain.dataclasses.paging import PageRequest
from cinereview.domain.policies.pagination import build_page, paginate


def test_first_page_window():
    page = paginate(list(range(25)), PageRequest(page=1, limit=10))
    assert page.items == list(range(10))
    assert page.current_page == 1
    assert page.total_pages == 3
    assert page.total_count == 25
    assert page.has_next_page is True
    assert page.has_prev_page is False


def test_last_partial_page():
    page = paginate(list(range(25)), PageRequest(page=3, limit=10))
    assert page.items == [20, 21, 22, 23, 24]
    assert page.has_next_page is False
    assert page.has_prev_page is True


def test_page_beyond_data_is_empty_not_error():
    page = paginate(list(range(5)), PageRequest(page=4, limit=2))
    assert page.items == []
    assert page.has_next_page is False
    assert page.total_pages == 3
    assert page.total_count == 5


def test_empty_sequence():
    page = paginate([], PageRequest())
    assert page.items == []
    assert page.total_pages == 0
    assert page.total_count == 0
    assert page.has_next_page is False
    assert page.has_prev_page is False


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 37])
@pytest.mark.parametrize("limit", [1, 3, 10, 50])
@pytest.mark.parametrize("page_no", [1, 2, 5])
def test_slice_never_exceeds_limit_and_total_pages_is_ceil(total, limit, page_no):
    page = paginate(list(range(total)), PageRequest(page=page_no, limit=limit))
    assert len(page.items) <= limit
    assert page.total_pages == math.ceil(total / limit)


def test_build_page_wraps_presliced_window():
    page = build_page(["k", "l"], total=12, req=PageRequest(page=6, limit=2))
    assert page.items == ["k", "l"]
    assert page.total_pages == 6
    assert page.has_next_page is False
    assert page.has_prev_page is True


def test_page_map_keeps_window():
    page = paginate([1, 2, 3], PageRequest(page=1, limit=2)).map(lambda x: x * 10)
    assert page.items == [10, 20]
    assert page.total_count == 3
    assert page.has_next_page is True


def test_page_past_the_end_has_no_next_page():
    page = paginate(list(range(7)), PageRequest(page=5, limit=3))
    assert page.items == []
    assert page.has_next_page is False
    assert page.has_prev_page is True
    assert page.total_pages == 3
