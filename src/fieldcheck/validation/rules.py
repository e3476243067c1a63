"""Built-in validation rules for fieldcheck forms.

Each validator is a callable with the signature::

    def rule(value: str) -> ValidationError | None:
        '''Return an error variant, or None if valid.'''

Parameterized validators are factory functions that return a validator::

    def max_length(n: int) -> Validator:
        def check(value: str) -> ValidationError | None:
            if len(value) > n:
                return MaxLength(n)
            return None
        return check

Custom validators follow the same protocol — any callable matching
``(str) -> ValidationError | None`` works in a field's rule list.

Every rule is total: numeric rules treat an unparsable value as a failed
check, never as an exception.
"""

import re
from collections.abc import Callable

from fieldcheck.errors import ConfigurationError
from fieldcheck.validation.result import (
    Custom,
    DoesNotExist,
    MaxLength,
    MinLength,
    NotGreaterThan,
    NotInRange,
    NotLessThan,
    NotNumeric,
    NotOneOf,
    NotRegex,
    ValidationError,
)

# Type alias for a validator function
type Validator = Callable[[str], ValidationError | None]

# Optional sign, ASCII digits only. Stricter than int(), which also
# accepts surrounding whitespace and underscores.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_integer(value: str) -> int | None:
    """Return *value* as an int, or None if it is not a plain integer."""
    if _INTEGER_RE.fullmatch(value) is None:
        return None
    try:
        return int(value)
    except ValueError:
        # Beyond sys.get_int_max_str_digits()
        return None


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def existence(value: str) -> ValidationError | None:
    """Field must be non-empty. Whitespace counts as content."""
    if len(value) == 0:
        return DoesNotExist()
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int) -> Validator:
    """String must be at least *n* characters."""

    def check(value: str) -> ValidationError | None:
        if len(value) < n:
            return MinLength(n)
        return None

    return check


def max_length(n: int) -> Validator:
    """String must be at most *n* characters."""

    def check(value: str) -> ValidationError | None:
        if len(value) > n:
            return MaxLength(n)
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def regex(pattern: str) -> Validator:
    """Value must contain a match for *pattern*.

    Uses ``re.search``, so anchor the pattern (``^...$``) to require the
    whole value to match.

    Raises:
        ConfigurationError: If *pattern* does not compile.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid regex pattern {pattern!r}: {exc}"
        raise ConfigurationError(msg) from exc

    def check(value: str) -> ValidationError | None:
        if compiled.search(value) is None:
            return NotRegex(pattern)
        return None

    return check


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def numericality(value: str) -> ValidationError | None:
    """Value must be a whole number."""
    if parse_integer(value) is None:
        return NotNumeric()
    return None


def numeric_range(lo: int, hi: int) -> Validator:
    """Value must be a whole number between *lo* and *hi*, inclusive.

    Reports which bound was crossed: ``NotGreaterThan(lo)`` when too small,
    ``NotLessThan(hi)`` when too large, ``NotInRange(lo, hi)`` when the
    value is not a number at all.

    Raises:
        ConfigurationError: If *lo* is greater than *hi*.
    """
    if lo > hi:
        msg = f"numeric_range() lower bound {lo} is greater than upper bound {hi}"
        raise ConfigurationError(msg)

    def check(value: str) -> ValidationError | None:
        number = parse_integer(value)
        if number is None:
            return NotInRange(lo, hi)
        if number < lo:
            return NotGreaterThan(lo)
        if number > hi:
            return NotLessThan(hi)
        return None

    return check


def less_than(n: int) -> Validator:
    """Value must be a whole number strictly below *n*."""

    def check(value: str) -> ValidationError | None:
        number = parse_integer(value)
        if number is None or number >= n:
            return NotLessThan(n)
        return None

    return check


def greater_than(n: int) -> Validator:
    """Value must be a whole number strictly above *n*."""

    def check(value: str) -> ValidationError | None:
        number = parse_integer(value)
        if number is None or number <= n:
            return NotGreaterThan(n)
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def is_one_of(*choices: str) -> Validator:
    """Value must equal one of the given choices exactly."""
    allowed = frozenset(choices)
    error = NotOneOf(tuple(choices))

    def check(value: str) -> ValidationError | None:
        if value not in allowed:
            return error
        return None

    return check


# ---------------------------------------------------------------------------
# Custom
# ---------------------------------------------------------------------------


def custom(predicate: Callable[[str], bool], message: str) -> Validator:
    """Value must satisfy *predicate*; otherwise fail with *message*.

    Example::

        no_spaces = custom(lambda v: " " not in v, "Must not contain spaces")
    """

    def check(value: str) -> ValidationError | None:
        if not predicate(value):
            return Custom(message)
        return None

    return check
