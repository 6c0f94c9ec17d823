"""Tests for wren.routing.builder — URL building from templates."""

import pytest

from wren.errors import MissingParameterError, ParameterValueError
from wren.routing.builder import build_url
from wren.routing.template import parse_template


class TestBuildUrl:
    def test_single_param(self) -> None:
        assert build_url(parse_template("/post/:id"), {"id": "42"}) == "/post/42"

    def test_two_params(self) -> None:
        tpl = parse_template("/calendar/:year/:month")
        assert build_url(tpl, {"year": "2024", "month": "5"}) == "/calendar/2024/5"

    def test_param_order_independent_of_mapping_order(self) -> None:
        tpl = parse_template("/calendar/:year/:month")
        assert build_url(tpl, {"month": "5", "year": "2024"}) == "/calendar/2024/5"

    def test_static_template_unchanged(self) -> None:
        assert build_url(parse_template("/login"), {}) == "/login"
        assert build_url(parse_template("/"), {"ignored": "x"}) == "/"

    def test_extra_keys_ignored(self) -> None:
        assert build_url(parse_template("/post/:id"), {"id": "1", "extra": "x"}) == "/post/1"

    def test_trailing_slash_preserved(self) -> None:
        assert build_url(parse_template("/post/:id/"), {"id": "1"}) == "/post/1/"

    def test_literal_containing_token_untouched(self) -> None:
        tpl = parse_template("/post:id/:id")
        assert build_url(tpl, {"id": "7"}) == "/post:id/7"

    def test_param_name_prefix_of_another(self) -> None:
        tpl = parse_template("/a/:id/:identifier")
        assert build_url(tpl, {"id": "1", "identifier": "2"}) == "/a/1/2"

    def test_non_string_value_stringified(self) -> None:
        assert build_url(parse_template("/post/:id"), {"id": 100}) == "/post/100"

    def test_custom_marker(self) -> None:
        tpl = parse_template("/post/$id", marker="$")
        assert build_url(tpl, {"id": "9"}) == "/post/9"


class TestMissingParameters:
    def test_raise_by_default(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            build_url(parse_template("/calendar/:year/:month"), {"year": "2024"})
        assert exc_info.value.missing == ("month",)
        assert exc_info.value.template == "/calendar/:year/:month"
        assert "month" in str(exc_info.value)

    def test_reports_all_missing(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            build_url(parse_template("/calendar/:year/:month"), {})
        assert exc_info.value.missing == ("year", "month")

    def test_keep_leaves_token(self) -> None:
        tpl = parse_template("/post/:id")
        assert build_url(tpl, {}, on_missing="keep") == "/post/:id"

    def test_keep_fills_what_it_can(self) -> None:
        tpl = parse_template("/calendar/:year/:month")
        assert build_url(tpl, {"month": "5"}, on_missing="keep") == "/calendar/:year/5"


class TestInvalidValues:
    @pytest.mark.parametrize("value", ["", "a/b", None])
    def test_rejected(self, value: object) -> None:
        with pytest.raises(ParameterValueError) as exc_info:
            build_url(parse_template("/post/:id"), {"id": value})
        assert exc_info.value.name == "id"

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            build_url(parse_template("/post/:id"), {"id": ""})
