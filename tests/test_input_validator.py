import pytest

from pager.models.paging import RedirectEffect
from pager.services.input_validator import check


def _check(start=None, stop=None, uri="/items", total_pages=10, page_size_max=1000):
    return check(start, stop, total_pages, page_size_max, request_uri=uri)


def test_accepts_valid_values():
    assert _check("3", "20") is None
    assert _check("10", "1000") is None
    assert _check(None, None) is None


def test_negative_page_index_redirects_permanently():
    effect = _check("-3")
    assert effect == RedirectEffect(location="/items?s=3", status_code=301)


def test_page_index_beyond_last_page_redirects_temporarily():
    effect = _check("50", uri="/items?q=abc&s=50")
    assert effect == RedirectEffect(location="/items?q=abc&s=10", status_code=307)


@pytest.mark.parametrize("raw", ["", "0", "abc", "1.5", "2x"])
def test_malformed_page_index_is_stripped(raw):
    effect = _check(raw, uri="/items?q=abc&s=" + raw)
    assert effect.status_code == 301
    assert effect.location == "/items?q=abc"


def test_malformed_page_index_without_other_params():
    assert _check("0", uri="/items?s=0").location == "/items"


def test_page_size_too_large_drops_page_index():
    effect = _check("4", "5000", uri="/items?q=x&s=4&ss=5000")
    assert effect == RedirectEffect(location="/items?q=x&ss=1000", status_code=307)


def test_negative_page_size():
    effect = _check(None, "-20", uri="/items?ss=-20")
    assert effect == RedirectEffect(location="/items?ss=20", status_code=301)


def test_malformed_page_size_is_stripped():
    effect = _check("2", "x", uri="/items?q=x&s=2&ss=x")
    assert effect == RedirectEffect(location="/items?q=x", status_code=301)


def test_page_index_is_checked_first():
    effect = _check("50", "5000", uri="/items?s=50&ss=5000")
    assert effect.status_code == 307
    assert effect.location == "/items?ss=5000&s=10"


def test_custom_keys_and_separator():
    effect = check(
        "-2", None, 10, 1000,
        request_uri="/items?q=x&p=-2",
        start_key="p",
        arg_sep=";",
    )
    assert effect == RedirectEffect(location="/items?q=x;p=2", status_code=301)


@pytest.mark.parametrize("raw", ["²", "٣", " 2", "2 ", "9" * 5000])
def test_non_ascii_padded_and_huge_page_index_is_stripped(raw):
    effect = _check(raw, uri="/items?q=abc")
    assert effect == RedirectEffect(location="/items?q=abc", status_code=301)


def test_negative_non_ascii_page_index_is_stripped():
    effect = _check("-²", uri="/items?q=abc")
    assert effect == RedirectEffect(location="/items?q=abc", status_code=301)


@pytest.mark.parametrize("raw", ["²", "-²", "٣", " 20", "9" * 5000])
def test_non_ascii_padded_and_huge_page_size_is_stripped(raw):
    effect = _check(None, raw, uri="/items?q=abc&s=2")
    assert effect == RedirectEffect(location="/items?q=abc", status_code=301)
