"""Human-readable messages for validation errors.

Rules report structured variants; this module is the one place that turns
them into text. Swap it out (or wrap ``error_message``) to localize.
"""

from collections.abc import Iterable

from fieldcheck.config import DEFAULT_CONFIG, FormConfig
from fieldcheck.validation.result import (
    Custom,
    DependencyError,
    DoesNotExist,
    MaxLength,
    MinLength,
    NotGreaterThan,
    NotInRange,
    NotLessThan,
    NotNumeric,
    NotOneOf,
    NotRegex,
    NotSameValue,
    ValidationError,
)


def error_message(error: ValidationError | DependencyError) -> str:
    """Render one error with its fixed message template."""
    match error:
        case DependencyError(error=inner):
            return error_message(inner)
        case DoesNotExist():
            return "This field is required"
        case MinLength(n):
            return f"Must be at least {n} characters"
        case MaxLength(n):
            return f"Must be at most {n} characters"
        case NotRegex(pattern):
            return f"Must match pattern: {pattern}"
        case NotNumeric():
            return "Must be a whole number"
        case NotInRange(lo, hi):
            return f"Must be a whole number between {lo} and {hi}"
        case NotLessThan(n):
            return f"Must be less than {n}"
        case NotGreaterThan(n):
            return f"Must be greater than {n}"
        case NotOneOf(choices):
            return f"Must be one of: {', '.join(choices)}"
        case NotSameValue(other):
            return f"Must match {other}"
        case Custom(message):
            return message
    msg = f"Unknown validation error: {error!r}"
    raise TypeError(msg)


def errors_to_display_string(
    errors: Iterable[ValidationError | DependencyError],
    config: FormConfig | None = None,
) -> str:
    """Join the messages for *errors* into one string.

    Returns ``config.no_errors_text`` when there are no errors::

        errors_to_display_string([MinLength(3), NotNumeric()])
        # "Must be at least 3 characters, Must be a whole number"
        errors_to_display_string([])
        # "No errors"
    """
    config = config or DEFAULT_CONFIG
    messages = [error_message(e) for e in errors]
    if not messages:
        return config.no_errors_text
    return config.error_separator.join(messages)
