r"""Tests for signpost.routing.template — template parsing and compilation."""

import pytest

from signpost.errors import ConfigurationError, InvalidTemplate
from signpost.routing.template import (
    CONVERTERS,
    Placeholder,
    compile_template,
    convert_param,
    normalize_path,
    split_template,
)


class TestNormalizePath:
    @pytest.mark.parametrize("path", ["/path1", "path1/", "/path1/", "path1"])
    def test_separators_trimmed(self, path: str) -> None:
        assert normalize_path(path) == "path1"

    def test_root(self) -> None:
        assert normalize_path("/") == ""
        assert normalize_path("") == ""

    def test_inner_separators_kept(self) -> None:
        assert normalize_path("/a/b/c/") == "a/b/c"


class TestSplitTemplate:
    def test_static(self) -> None:
        assert split_template("users") == ["users"]

    def test_param(self) -> None:
        assert split_template("users/{id}") == ["users/", Placeholder("id")]

    def test_constrained_param(self) -> None:
        assert split_template(r"users/{id:\d+}") == ["users/", Placeholder("id", r"\d+")]

    def test_constraint_with_braces(self) -> None:
        parts = split_template(r"archive/{year:\d{4}}/{month:\d{2}}")
        assert parts == [
            "archive/",
            Placeholder("year", r"\d{4}"),
            "/",
            Placeholder("month", r"\d{2}"),
        ]

    def test_param_inside_segment(self) -> None:
        assert split_template("v{major}.json") == ["v", Placeholder("major"), ".json"]

    def test_name_lowercased(self) -> None:
        assert split_template("{ParamName}") == [Placeholder("paramname")]

    def test_constraint_keeps_case(self) -> None:
        assert split_template("{code:[A-Z]+}") == [Placeholder("code", "[A-Z]+")]

    @pytest.mark.parametrize(
        "template",
        ["users/{id", "users/id}", "{}", "{1st}", "{user-id}", "{id:}", "{ id }"],
    )
    def test_rejects_malformed(self, template: str) -> None:
        with pytest.raises(InvalidTemplate) as exc_info:
            split_template(template)
        assert exc_info.value.template == template


class TestCompileTemplate:
    def test_static_match(self) -> None:
        compiled = compile_template("/path1")
        assert compiled.param_names == ()
        assert compiled.matcher.fullmatch("path1")
        assert compiled.matcher.fullmatch("path1/extra") is None

    def test_case_insensitive_by_default(self) -> None:
        compiled = compile_template("path1")
        assert compiled.matcher.fullmatch("PATH1")

    def test_case_sensitive(self) -> None:
        compiled = compile_template("path1", case_sensitive=True)
        assert compiled.matcher.fullmatch("PATH1") is None
        assert compiled.matcher.fullmatch("path1")

    def test_root(self) -> None:
        compiled = compile_template("/")
        assert compiled.matcher.fullmatch("")
        assert compiled.matcher.fullmatch("home") is None

    def test_literals_escaped(self) -> None:
        compiled = compile_template("files/report.pdf")
        assert compiled.matcher.fullmatch("files/report.pdf")
        assert compiled.matcher.fullmatch("files/reportXpdf") is None

    def test_unconstrained_param(self) -> None:
        compiled = compile_template("users/{name}")
        assert compiled.param_names == ("name",)
        m = compiled.matcher.fullmatch("users/alice")
        assert m is not None
        assert m.group("name") == "alice"

    def test_unconstrained_param_excludes_slash(self) -> None:
        compiled = compile_template("users/{name}")
        assert compiled.matcher.fullmatch("users/alice/posts") is None

    def test_constrained_param(self) -> None:
        compiled = compile_template(r"paramsPath/{paramName:\d}")
        assert compiled.param_names == ("paramname",)
        assert compiled.matcher.fullmatch("paramsPath/5")
        assert compiled.matcher.fullmatch("paramsPath/55") is None
        assert compiled.matcher.fullmatch("paramsPath/x") is None

    def test_param_order_preserved(self) -> None:
        compiled = compile_template("{b}/{a}/{c}")
        assert compiled.param_names == ("b", "a", "c")

    def test_custom_param_pattern(self) -> None:
        compiled = compile_template("tags/{tag}", param_pattern=r"[a-z]+")
        assert compiled.matcher.fullmatch("tags/python")
        assert compiled.matcher.fullmatch("tags/py3") is None

    def test_converter_recorded(self) -> None:
        compiled = compile_template("users/{id:int}/price/{amount:float}/{slug:str}")
        assert compiled.converters == {"id": "int", "amount": "float", "slug": "str"}
        assert compiled.matcher.fullmatch("users/42/price/9.99/hello")
        assert compiled.matcher.fullmatch("users/abc/price/9.99/hello") is None

    def test_raw_constraint_not_a_converter(self) -> None:
        compiled = compile_template(r"users/{id:\d+}")
        assert compiled.converters == {}

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(InvalidTemplate, match="Duplicate parameter 'id'"):
            compile_template("a/{id}/b/{ID}")

    def test_invalid_regex_rejected(self) -> None:
        with pytest.raises(InvalidTemplate, match="Invalid constraint"):
            compile_template("a/{id:[}")

    def test_template_error_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            compile_template("a/{id")


class TestConvertParam:
    def test_all_types_registered(self) -> None:
        assert set(CONVERTERS) == {"str", "int", "float"}

    def test_str_passthrough(self) -> None:
        assert convert_param("hello", "str") == "hello"

    def test_int_conversion(self) -> None:
        assert convert_param("42", "int") == 42
        assert isinstance(convert_param("42", "int"), int)

    def test_float_conversion(self) -> None:
        assert convert_param("3.14", "float") == pytest.approx(3.14)

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(KeyError):
            convert_param("value", "uuid")
