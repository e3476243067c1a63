"""Template filters for rendering fieldcheck forms.

Registered on a kida Environment by ``register_filters()``. Each filter
takes the form first so templates read naturally::

    <input{{ form | input_attrs("email", validate_url="/signup/validate") }}>
    {% for msg in form | field_errors("email") %}
      <span class="error">{{ msg }}</span>
    {% end %}

Without a ``Form``, filters fall back to the two plain dicts a handler
usually passes to a template:

- ``field_value`` reads a ``{field: value}`` dict, the submitted values
  used to re-populate inputs (``form=dict(form_data)``).
- ``field_errors``, ``error_display``, ``field_state`` and ``error_map``
  read a ``{field: [messages]}`` dict (``errors=...``).

``input_attrs`` needs a ``Form``, which carries both values and errors.
"""

import html
from typing import Any

from kida.template import Markup

from fieldcheck.config import DEFAULT_CONFIG
from fieldcheck.form import Form, field_value as _field_value
from fieldcheck.messages import error_message


def field_value(form: Any, name: str) -> str:
    """Current input of field *name*, ``""`` when unknown or when *form* is None.

    A plain dict is read as submitted ``{field: value}`` data, not as an
    error map.

    Example:
        <input name="title" value="{{ form | field_value("title") }}">

    """
    if isinstance(form, Form):
        return _field_value(form, name)
    if isinstance(form, dict):
        value = form.get(name)
        return str(value) if value is not None else ""
    return ""


def field_errors(form: Any, name: str) -> list[str]:
    """Messages for field *name*.

    Handles a ``Form`` (rule errors plus shared cross-field errors) or a
    ``{field: [messages]}`` dict; anything else gives an empty list.

    Example:
        {% for msg in form | field_errors("username") %}
          <span class="error">{{ msg }}</span>
        {% end %}

    """
    if isinstance(form, Form):
        return [error_message(e) for e in form.errors_for(name)]
    if isinstance(form, dict):
        val = form.get(name, [])
        return list(val) if val else []
    return []


def error_display(form: Any, name: str) -> str:
    """Messages for field *name* joined into one string.

    Uses the form's ``FormConfig`` for the separator and the empty text.

    Example:
        <p class="hint">{{ form | error_display("age") }}</p>
        → "Must be greater than 17"

    """
    if isinstance(form, Form):
        return form.display(name)
    messages = field_errors(form, name)
    if not messages:
        return DEFAULT_CONFIG.no_errors_text
    return DEFAULT_CONFIG.error_separator.join(messages)


def field_state(form: Any, name: str) -> str:
    """``"invalid"`` when field *name* has errors, else ``"valid"``.

    Example:
        <div class="field field--{{ form | field_state("email") }}">

    """
    return "invalid" if field_errors(form, name) else "valid"


def error_map(form: Any) -> dict[str, list[str]]:
    """All messages keyed by field, for templates that take ``errors=...``."""
    if isinstance(form, Form):
        return form.error_map()
    if isinstance(form, dict):
        return {k: list(v) for k, v in form.items() if v}
    return {}


def input_attrs(
    form: Form,
    name: str,
    *,
    validate_url: str | None = None,
    trigger: str = "input changed delay:200ms",
    target: str | None = None,
) -> Markup:
    """Build the attributes for an ``<input>`` bound to field *name*.

    Always emits ``name``, ``id`` and ``value``; adds ``aria-invalid`` when
    the field has errors. With *validate_url*, the input re-posts itself on
    every keystroke so the server can run ``update_input()`` and swap in
    the new error state:

        <input{{ form | input_attrs("email", validate_url="/validate") }}>
        → <input name="email" id="email" value="" aria-invalid="true"
                 hx-post="/validate" hx-trigger="input changed delay:200ms">
    """
    escaped = html.escape(name, quote=True)
    attrs: list[str] = [
        f' name="{escaped}"',
        f' id="{escaped}"',
        f' value="{html.escape(field_value(form, name), quote=True)}"',
    ]
    if field_errors(form, name):
        attrs.append(' aria-invalid="true"')
    if validate_url:
        attrs.append(f' hx-post="{html.escape(validate_url, quote=True)}"')
        attrs.append(f' hx-trigger="{html.escape(trigger, quote=True)}"')
        if target:
            attrs.append(f' hx-target="{html.escape(target, quote=True)}"')
    return Markup("".join(attrs))


# All fieldcheck filters, registered by register_filters().
BUILTIN_FILTERS: dict[str, Any] = {
    "error_display": error_display,
    "error_map": error_map,
    "field_errors": field_errors,
    "field_state": field_state,
    "field_value": field_value,
    "input_attrs": input_attrs,
}
