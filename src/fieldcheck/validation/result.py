"""Validation outcomes — tagged error variants.

Every rule reports failure with its own frozen dataclass carrying the
parameters needed to describe it. Nothing here holds display text except
``Custom``; turning an error into a message is ``fieldcheck.messages``'s job.

Match on the variant to react to a specific failure::

    match error:
        case MinLength(n):
            ...
        case NotInRange(lo, hi):
            ...
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DoesNotExist:
    """The value is empty."""


@dataclass(frozen=True, slots=True)
class MinLength:
    """The value is shorter than *n* characters."""

    n: int


@dataclass(frozen=True, slots=True)
class MaxLength:
    """The value is longer than *n* characters."""

    n: int


@dataclass(frozen=True, slots=True)
class NotRegex:
    """The value does not match *pattern*."""

    pattern: str


@dataclass(frozen=True, slots=True)
class NotNumeric:
    """The value is not a whole number."""


@dataclass(frozen=True, slots=True)
class NotInRange:
    """The value is not a whole number, so it cannot be in ``[lo, hi]``."""

    lo: int
    hi: int


@dataclass(frozen=True, slots=True)
class NotLessThan:
    """The value is not below *n*."""

    n: int


@dataclass(frozen=True, slots=True)
class NotGreaterThan:
    """The value is not above *n*."""

    n: int


@dataclass(frozen=True, slots=True)
class NotOneOf:
    """The value is not one of *choices*."""

    choices: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NotSameValue:
    """The value differs from the value of field *other*."""

    other: str


@dataclass(frozen=True, slots=True)
class Custom:
    """A failure described by a caller-supplied message."""

    message: str


type ValidationError = (
    DoesNotExist
    | MinLength
    | MaxLength
    | NotRegex
    | NotNumeric
    | NotInRange
    | NotLessThan
    | NotGreaterThan
    | NotOneOf
    | NotSameValue
    | Custom
)


@dataclass(frozen=True, slots=True)
class DependencyError:
    """A cross-field rule violation.

    ``error`` is shown on ``target_field``; lookups by either
    ``source_field`` or ``target_field`` see it.
    """

    source_field: str
    target_field: str
    error: ValidationError

    def involves(self, name: str) -> bool:
        """True if *name* is this error's source or target field."""
        return name in (self.source_field, self.target_field)
