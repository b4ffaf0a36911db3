import pytest

from pager.util.paging import abs_int, current_page_for, offset_for, resolve_page_size, total_pages_for


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3), ("-3", 3), (7, 7), (-7, 7), ("", 0), (None, 0), ("abc", 0)],
)
def test_abs_int(raw, expected):
    assert abs_int(raw) == expected


def test_offset_for_is_one_based():
    assert offset_for(0, 10) == 0
    assert offset_for(1, 10) == 0
    assert offset_for(2, 10) == 10
    assert offset_for(3, 25) == 50


def test_resolve_page_size_default_and_cap():
    assert resolve_page_size(0, 10, 1000) == 10
    assert resolve_page_size(20, 10, 1000) == 20
    assert resolve_page_size(5000, 10, 1000) == 1000


@pytest.mark.parametrize(
    "total, size, pages",
    [(None, 10, 1), (0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (95, 10, 10), (100, 10, 10)],
)
def test_total_pages_for(total, size, pages):
    assert total_pages_for(total, size) == pages


def test_total_pages_matches_ceil_for_a_range():
    for total in range(0, 120):
        for size in (1, 3, 10, 25):
            expected = max(1, -(-total // size))
            assert total_pages_for(total, size) == expected


def test_current_page_for():
    assert current_page_for(0, 10) == 1
    assert current_page_for(20, 10) == 3
    assert current_page_for(0, 0) == 1


@pytest.mark.parametrize("raw", ["²", "٣", " 3", "9" * 5000])
def test_abs_int_rejects_non_ascii_and_huge_values(raw):
    assert abs_int(raw) == 0
