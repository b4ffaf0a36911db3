from pager.util.query import (
    build_query,
    key_set,
    parse_params,
    prepare_query,
    split_request_uri,
    strip_location,
)


def test_split_request_uri():
    assert split_request_uri("/list?a=1&b=2") == ("/list", "a=1&b=2")
    assert split_request_uri("/list") == ("/list", "")
    assert split_request_uri("") == ("/", "")


def test_parse_params_last_value_wins_and_keeps_blanks():
    assert parse_params("s=1&s=4&ss=") == {"s": "4", "ss": ""}


def test_key_set_accepts_strings_and_iterables():
    assert key_set("s", "tab, sort", None, ["x", ""]) == {"s", "tab", "sort", "x"}


def test_build_query_excludes_keys():
    assert build_query("q=a+b&s=3&tab=2", {"s"}) == "q=a+b&tab=2"
    assert build_query("q=x&s=3", {"s"}, arg_sep=";") == "q=x"
    assert build_query("a=1&b=2", (), arg_sep=";") == "a=1;b=2"


def test_prepare_query_escapes_for_html():
    assert prepare_query("/list?q=x&s=3", {"s"}) == "/list?q=x&amp;"
    assert prepare_query("/list?s=3", {"s"}) == "/list?"
    assert prepare_query("/list", {"s"}) == "/list?"


def test_prepare_query_raw_for_redirects():
    assert prepare_query("/list?q=x&s=3", {"s"}, escape=False) == "/list?q=x&"


def test_strip_location():
    assert strip_location("/list?q=x&") == "/list?q=x"
    assert strip_location("/list?") == "/list"
    assert strip_location("/list?q=x;", arg_sep=";") == "/list?q=x"
