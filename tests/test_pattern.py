"""Tests for routemap.pattern — parsing, formatting, and joining patterns."""

import pytest

from routemap.errors import InvalidParams, InvalidPattern
from routemap.pattern import (
    OptionalGroup,
    Text,
    Variable,
    Wildcard,
    format_pattern,
    join_patterns,
    parse_pattern,
)


class TestParsePattern:
    def test_static(self) -> None:
        assert parse_pattern("/books") == (Text("/books"),)

    def test_variable(self) -> None:
        assert parse_pattern("/books/:id") == (Text("/books/"), Variable("id"))

    def test_variable_between_text(self) -> None:
        assert parse_pattern("/books/:id/edit") == (
            Text("/books/"),
            Variable("id"),
            Text("/edit"),
        )

    def test_named_wildcard(self) -> None:
        assert parse_pattern("/files/*path") == (Text("/files/"), Wildcard("path"))

    def test_bare_wildcard(self) -> None:
        assert parse_pattern("/files/*") == (Text("/files/"), Wildcard("*"))

    def test_optional_group(self) -> None:
        assert parse_pattern("/books(.:format)") == (
            Text("/books"),
            OptionalGroup((Text("."), Variable("format"))),
        )

    def test_nested_optional_groups(self) -> None:
        tokens = parse_pattern("/a(/:b(/:c))")
        assert tokens == (
            Text("/a"),
            OptionalGroup((Text("/"), Variable("b"), OptionalGroup((Text("/"), Variable("c"))))),
        )

    def test_scheme_and_port_are_text(self) -> None:
        assert parse_pattern("https://host:8080/x") == (Text("https://host:8080/x"),)

    def test_unclosed_group(self) -> None:
        with pytest.raises(InvalidPattern, match="unclosed"):
            parse_pattern("/books(/:id")

    def test_unmatched_close(self) -> None:
        with pytest.raises(InvalidPattern, match="unmatched"):
            parse_pattern("/books)/:id")

    def test_cached(self) -> None:
        assert parse_pattern("/cached/:id") is parse_pattern("/cached/:id")


class TestFormatPattern:
    def test_substitutes_variables(self) -> None:
        assert format_pattern("/posts/:slug", {"slug": "hello"}) == "/posts/hello"

    def test_wildcard_keeps_slashes(self) -> None:
        assert format_pattern("/files/*path", {"path": "docs/a.md"}) == "/files/docs/a.md"

    def test_bare_wildcard_key(self) -> None:
        assert format_pattern("/files/*", {"*": "x/y"}) == "/files/x/y"

    def test_optional_group_included(self) -> None:
        assert format_pattern("/books(.:format)", {"format": "json"}) == "/books.json"

    def test_optional_group_dropped(self) -> None:
        assert format_pattern("/books(.:format)") == "/books"

    def test_static_optional_group_dropped(self) -> None:
        assert format_pattern("/api(/v1)/books") == "/api/books"

    def test_nested_optional_partial(self) -> None:
        assert format_pattern("/a(/:b(/:c))", {"b": "1"}) == "/a/1"

    def test_nested_optional_full(self) -> None:
        assert format_pattern("/a(/:b(/:c))", {"b": "1", "c": "2"}) == "/a/1/2"

    def test_none_counts_as_missing(self) -> None:
        with pytest.raises(InvalidParams):
            format_pattern("/books/:id", {"id": None})

    def test_missing_lists_every_name_once(self) -> None:
        with pytest.raises(InvalidParams) as exc_info:
            format_pattern("/:a/:b/:a", {})
        assert exc_info.value.missing == ("a", "b")
        assert "'a', 'b'" in str(exc_info.value)

    def test_optional_does_not_report_missing(self) -> None:
        with pytest.raises(InvalidParams) as exc_info:
            format_pattern("/:id(.:format)")
        assert exc_info.value.missing == ("id",)


class TestJoinPatterns:
    def test_relative_base(self) -> None:
        assert join_patterns("books", "new") == "/books/new"

    def test_root_suffix(self) -> None:
        assert join_patterns("books", "/") == "/books"
        assert join_patterns("books", "") == "/books"

    def test_strips_duplicate_slashes(self) -> None:
        assert join_patterns("/books/", "/:id") == "/books/:id"

    def test_empty_base(self) -> None:
        assert join_patterns("", "about") == "/about"
        assert join_patterns("/", "/") == "/"

    def test_nested_base(self) -> None:
        assert join_patterns("brands/:brandId/products", ":id/edit") == "/brands/:brandId/products/:id/edit"

    def test_keeps_trailing_slash_of_pattern(self) -> None:
        assert join_patterns("docs", "guide/") == "/docs/guide/"

    def test_absolute_base(self) -> None:
        assert join_patterns("https://x.io/api/", "/v1") == "https://x.io/api/v1"
        assert join_patterns("https://x.io", "/") == "https://x.io"
