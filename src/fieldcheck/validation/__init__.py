"""Form validation — composable rules, structured errors.

Usage::

    from fieldcheck.validation import validate_field, existence, max_length

    errors = validate_field("", [existence, max_length(200)])
    # errors == (DoesNotExist(),)

Rules return a tagged error variant on failure and ``None`` on success.
Field validation runs every rule and keeps every failure, so a single value
can report several problems at once.
"""

from collections.abc import Iterable

from fieldcheck.validation.dependencies import (
    DependencyValidator,
    have_same_value,
    validate_dependencies,
)
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
from fieldcheck.validation.rules import (
    Validator,
    custom,
    existence,
    greater_than,
    is_one_of,
    less_than,
    max_length,
    min_length,
    numeric_range,
    numericality,
    regex,
)

__all__ = [
    "Custom",
    "DependencyError",
    "DependencyValidator",
    "DoesNotExist",
    "MaxLength",
    "MinLength",
    "NotGreaterThan",
    "NotInRange",
    "NotLessThan",
    "NotNumeric",
    "NotOneOf",
    "NotRegex",
    "NotSameValue",
    "ValidationError",
    "Validator",
    "custom",
    "existence",
    "greater_than",
    "have_same_value",
    "is_one_of",
    "less_than",
    "max_length",
    "min_length",
    "numeric_range",
    "numericality",
    "regex",
    "validate_dependencies",
    "validate_field",
]


def validate_field(
    value: str,
    validators: Iterable[Validator],
) -> tuple[ValidationError, ...]:
    """Validate one value against an ordered list of rules.

    Args:
        value: The field's current input.
        validators: Rules to apply, in order. Each returns an error
            variant on failure, or ``None`` on success.

    Returns:
        The errors, in rule order. Empty when the value is valid.

    Example::

        validate_field("x", [min_length(3), regex("^[0-9]+$")])
        # (MinLength(3), NotRegex("^[0-9]+$"))
    """
    return tuple(error for validator in validators if (error := validator(value)) is not None)
