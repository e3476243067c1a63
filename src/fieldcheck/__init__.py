"""fieldcheck — Incremental form validation with structured errors.

Attach ordered rules to named inputs, cross-field rules to the form, and
get back an immutable snapshot that knows every field's errors and whether
the whole form is valid. Recomputed on every keystroke.

Basic usage::

    from fieldcheck import existence, have_same_value, init_form, min_length

    form = init_form(
        {
            "password": [existence, min_length(8)],
            "confirm": [existence],
        },
        [have_same_value("password", "confirm")],
    )
    form = form.update("password", "correct horse")
    form.is_valid                # False
    form.display("confirm")      # "This field is required, Must match password"

Template helpers (kida)::

    from fieldcheck.templating import create_environment
    env = create_environment()
    env.from_string('{{ form | error_display("confirm") }}').render({"form": form})
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Custom",
    "DependencyError",
    "DoesNotExist",
    "Field",
    "FieldSpec",
    "FieldcheckError",
    "Form",
    "FormConfig",
    "MaxLength",
    "MinLength",
    "NotGreaterThan",
    "NotInRange",
    "NotLessThan",
    "NotNumeric",
    "NotOneOf",
    "NotRegex",
    "NotSameValue",
    "custom",
    "error_message",
    "errors_to_display_string",
    "existence",
    "field_errors",
    "field_value",
    "greater_than",
    "have_same_value",
    "init_form",
    "is_one_of",
    "is_valid",
    "less_than",
    "max_length",
    "min_length",
    "numeric_range",
    "numericality",
    "populate",
    "regex",
    "reset",
    "update_input",
    "validate_dependencies",
    "validate_field",
]

_FORM_NAMES = frozenset(
    {
        "Field",
        "FieldSpec",
        "Form",
        "field_errors",
        "field_value",
        "init_form",
        "is_valid",
        "populate",
        "reset",
        "update_input",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fieldcheck`` fast while providing a flat top-level API.
    """
    if name in _FORM_NAMES:
        from fieldcheck import form as _form

        return getattr(_form, name)

    if name == "FormConfig":
        from fieldcheck.config import FormConfig

        return FormConfig

    if name in ("error_message", "errors_to_display_string"):
        from fieldcheck import messages as _messages

        return getattr(_messages, name)

    if name in ("ConfigurationError", "FieldcheckError"):
        from fieldcheck import errors as _errors

        return getattr(_errors, name)

    if name in __all__:
        from fieldcheck import validation as _validation

        return getattr(_validation, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
