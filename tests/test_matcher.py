"""Tests for wren.routing.matcher — exact, slash-strict, case-sensitive matching."""

import pytest

from wren.routing.matcher import PathMatch, match, match_template
from wren.routing.registry import PathRegistry
from wren.routing.template import parse_template


class TestMatchTemplate:
    def test_root(self) -> None:
        assert match_template(parse_template("/"), "/") == {}

    def test_literal(self) -> None:
        assert match_template(parse_template("/login"), "/login") == {}

    def test_param_binds(self) -> None:
        assert match_template(parse_template("/post/:id"), "/post/42") == {"id": "42"}

    def test_two_params(self) -> None:
        params = match_template(parse_template("/calendar/:year/:month"), "/calendar/2024/5")
        assert params == {"year": "2024", "month": "5"}

    def test_params_read_only(self) -> None:
        params = match_template(parse_template("/post/:id"), "/post/42")
        assert params is not None
        with pytest.raises(TypeError):
            params["id"] = "other"  # type: ignore[index]

    @pytest.mark.parametrize("path", ["/post/1/extra", "/post", "/post/"])
    def test_segment_count_exact(self, path: str) -> None:
        assert match_template(parse_template("/post/:id"), path) is None

    def test_trailing_slash_on_path(self) -> None:
        assert match_template(parse_template("/post/:id"), "/post/1/") is None
        assert match_template(parse_template("/login"), "/login/") is None

    def test_trailing_slash_on_template(self) -> None:
        tpl = parse_template("/post/:id/")
        assert match_template(tpl, "/post/1") is None
        assert match_template(tpl, "/post/1/") == {"id": "1"}

    def test_case_sensitive(self) -> None:
        assert match_template(parse_template("/login"), "/Login") is None
        assert match_template(parse_template("/post/:id"), "/POST/1") is None

    def test_param_value_keeps_case(self) -> None:
        assert match_template(parse_template("/post/:id"), "/post/AbC") == {"id": "AbC"}

    def test_empty_param_segment(self) -> None:
        assert match_template(parse_template("/post/:id/edit"), "/post//edit") is None

    def test_prefix_not_enough(self) -> None:
        assert match_template(parse_template("/"), "/login") is None

    def test_relative_path(self) -> None:
        assert match_template(parse_template("/login"), "login") is None

    def test_non_string_path(self) -> None:
        assert match_template(parse_template("/"), None) is None  # type: ignore[arg-type]


class TestMatchRegistry:
    def test_match_returns_entry_and_params(self, registry: PathRegistry) -> None:
        found = match(registry, "/post/42")
        assert isinstance(found, PathMatch)
        assert found.handler == "post"
        assert found.template.path == "/post/:id"
        assert found.params == {"id": "42"}

    def test_no_match(self, registry: PathRegistry) -> None:
        assert match(registry, "/nonexistent") is None

    def test_first_registered_wins(self) -> None:
        registry = PathRegistry([("/post/new", "new"), ("/post/:id", "post")])
        assert match(registry, "/post/new").handler == "new"
        assert match(registry, "/post/7").handler == "post"

    def test_order_is_the_tie_break(self) -> None:
        registry = PathRegistry([("/post/:id", "post"), ("/post/new", "new")])
        found = match(registry, "/post/new")
        assert found.handler == "post"
        assert found.params == {"id": "new"}

    def test_accepts_plain_entries(self, registry: PathRegistry) -> None:
        found = match(registry.entries, "/login")
        assert found is not None
        assert found.handler == "login"


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("template", "params"),
        [
            ("/", {}),
            ("/login", {}),
            ("/post/:id", {"id": "42"}),
            ("/calendar/:year/:month", {"year": "1919", "month": "3"}),
        ],
    )
    def test_build_then_match(self, registry: PathRegistry, template: str, params: dict) -> None:
        found = registry.match(registry.build(template, {**params, "extra": "x"}))
        assert found is not None
        assert found.template.path == template
        assert found.params == params
