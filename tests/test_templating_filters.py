"""Tests for fieldcheck template filters and kida environment setup."""

from __future__ import annotations

from kida import Environment

from fieldcheck.config import FormConfig
from fieldcheck.form import Form, init_form, update_input
from fieldcheck.templating import BUILTIN_FILTERS, create_environment, register_filters
from fieldcheck.templating.filters import (
    error_display,
    error_map,
    field_errors,
    field_state,
    field_value,
    input_attrs,
)
from fieldcheck.validation import existence, have_same_value, min_length


def _form() -> Form:
    form = init_form(
        {
            "username": [existence, min_length(3)],
            "password": [existence],
            "confirm": [],
        },
        [have_same_value("password", "confirm")],
    )
    form = update_input(form, "username", "al")
    return update_input(form, "password", "secret")


def _render(env: Environment, source: str, **ctx: object) -> str:
    tpl = env.from_string(source)
    return tpl.render(ctx).strip()


# ── field_value ──────────────────────────────────────────────────────────


class TestFieldValue:
    def test_form(self) -> None:
        assert field_value(_form(), "username") == "al"

    def test_unknown_field(self) -> None:
        assert field_value(_form(), "nope") == ""

    def test_dict(self) -> None:
        assert field_value({"title": "Hello"}, "title") == "Hello"
        assert field_value({"title": None}, "title") == ""

    def test_none(self) -> None:
        assert field_value(None, "title") == ""

    def test_dict_is_submitted_values(self) -> None:
        """A dict holds re-population values, while errors come from a separate dict."""
        values = {"title": "Hello"}
        errors = {"title": ["Too short"]}
        assert field_value(values, "title") == "Hello"
        assert field_errors(errors, "title") == ["Too short"]

    def test_dict_shapes_documented(self) -> None:
        from fieldcheck.templating import filters

        assert "{field: value}" in (filters.__doc__ or "")
        assert "{field: [messages]}" in (filters.__doc__ or "")
        assert "{field: value}" in (field_value.__doc__ or "")


# ── field_errors ─────────────────────────────────────────────────────────


class TestFieldErrors:
    def test_form_rule_errors(self) -> None:
        assert field_errors(_form(), "username") == ["Must be at least 3 characters"]

    def test_form_shared_errors_on_both_fields(self) -> None:
        form = _form()
        assert field_errors(form, "password") == ["Must match password"]
        assert field_errors(form, "confirm") == ["Must match password"]

    def test_dict_errors(self) -> None:
        errors = {"username": ["too short", "required"], "email": ["invalid"]}
        assert field_errors(errors, "username") == ["too short", "required"]

    def test_missing_field_returns_empty(self) -> None:
        assert field_errors({"username": ["too short"]}, "email") == []
        assert field_errors(_form(), "email") == []

    def test_none_and_non_dict(self) -> None:
        assert field_errors(None, "username") == []
        assert field_errors("not a dict", "field") == []


# ── error_display / field_state / error_map ──────────────────────────────


class TestErrorDisplay:
    def test_joined(self) -> None:
        form = update_input(_form(), "username", "")
        assert error_display(form, "username") == (
            "This field is required, Must be at least 3 characters"
        )

    def test_no_errors(self) -> None:
        form = update_input(_form(), "username", "alice")
        assert error_display(form, "username") == "No errors"

    def test_uses_form_config(self) -> None:
        form = init_form(
            {"code": [existence, min_length(2)]},
            config=FormConfig(error_separator=" / ", no_errors_text="OK"),
        )
        assert error_display(form, "code") == (
            "This field is required / Must be at least 2 characters"
        )
        assert error_display(update_input(form, "code", "ab"), "code") == "OK"

    def test_dict(self) -> None:
        assert error_display({"a": ["x", "y"]}, "a") == "x, y"

    def test_matches_form_display(self) -> None:
        form = init_form(
            {"code": [existence, min_length(2)]},
            config=FormConfig(error_separator=" / ", no_errors_text="OK"),
        )
        for value in ("", "a", "ab"):
            form = update_input(form, "code", value)
            assert error_display(form, "code") == form.display("code")


class TestFieldState:
    def test_states(self) -> None:
        form = update_input(_form(), "confirm", "secret")
        assert field_state(form, "username") == "invalid"
        assert field_state(form, "confirm") == "valid"


class TestErrorMap:
    def test_form(self) -> None:
        assert error_map(_form()) == {
            "username": ["Must be at least 3 characters"],
            "password": ["Must match password"],
            "confirm": ["Must match password"],
        }

    def test_dict_drops_empty(self) -> None:
        assert error_map({"a": ["x"], "b": []}) == {"a": ["x"]}

    def test_other(self) -> None:
        assert error_map(None) == {}


# ── input_attrs ──────────────────────────────────────────────────────────


class TestInputAttrs:
    def test_basic(self) -> None:
        html = str(input_attrs(_form(), "username"))
        assert 'name="username"' in html
        assert 'id="username"' in html
        assert 'value="al"' in html
        assert 'aria-invalid="true"' in html
        assert "hx-post" not in html

    def test_valid_field_not_marked(self) -> None:
        form = update_input(_form(), "username", "alice")
        assert "aria-invalid" not in str(input_attrs(form, "username"))

    def test_escapes_value(self) -> None:
        form = update_input(_form(), "username", '"><script>')
        html = str(input_attrs(form, "username"))
        assert "<script>" not in html
        assert "&quot;&gt;&lt;script&gt;" in html

    def test_htmx_binding(self) -> None:
        html = str(input_attrs(_form(), "username", validate_url="/signup/validate", target="#form"))
        assert 'hx-post="/signup/validate"' in html
        assert 'hx-trigger="input changed delay:200ms"' in html
        assert 'hx-target="#form"' in html

    def test_returns_markup(self) -> None:
        """Output is Markup so autoescape does not double-escape."""
        assert hasattr(input_attrs(_form(), "username"), "__html__")


# ── environment ──────────────────────────────────────────────────────────


class TestEnvironment:
    def test_register_filters(self) -> None:
        env = register_filters(Environment(autoescape=True))
        html = _render(env, '{{ form | error_display("username") }}', form=_form())
        assert html == "Must be at least 3 characters"

    def test_create_environment(self) -> None:
        env = create_environment()
        html = _render(
            env,
            '{% for msg in form | field_errors("confirm") %}'
            '<span class="error">{{ msg }}</span>'
            "{% end %}",
            form=_form(),
        )
        assert html == '<span class="error">Must match password</span>'

    def test_input_in_template(self) -> None:
        env = create_environment()
        html = _render(
            env,
            '<input{{ form | input_attrs("username", validate_url="/v") }}>',
            form=_form(),
        )
        assert html.startswith('<input name="username"')
        assert 'hx-post="/v"' in html

    def test_all_filters_listed(self) -> None:
        assert set(BUILTIN_FILTERS) == {
            "error_display",
            "error_map",
            "field_errors",
            "field_state",
            "field_value",
            "input_attrs",
        }
