"""Cross-field ("dependency") validation.

A dependency validator sees every field of the form at once and reports at
most one ``DependencyError``::

    def rule(fields: Mapping[str, Field]) -> DependencyError | None: ...

The error names a source and a target field. The form attaches it to the
target for display; ``field_errors()`` shows it on both.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING

from fieldcheck.validation.result import DependencyError, NotSameValue

if TYPE_CHECKING:
    from fieldcheck.form import Field

logger = logging.getLogger("fieldcheck.validation")

type DependencyValidator = Callable[[Mapping[str, Field]], DependencyError | None]


def have_same_value(field_a: str, field_b: str) -> DependencyValidator:
    """Fields *field_a* and *field_b* must hold identical input.

    The error is attributed from *field_a* to *field_b*, so a "confirm
    password" field listed second is where the message shows up::

        have_same_value("password", "password_confirmation")

    Passes silently when either field is missing from the form.
    """

    def check(fields: Mapping[str, Field]) -> DependencyError | None:
        a = fields.get(field_a)
        b = fields.get(field_b)
        if a is None or b is None:
            return None
        if a.input != b.input:
            return DependencyError(
                source_field=field_a,
                target_field=field_b,
                error=NotSameValue(field_a),
            )
        return None

    return check


def validate_dependencies(
    fields: Mapping[str, Field],
    dependency_validators: Iterable[DependencyValidator],
) -> tuple[DependencyError, ...]:
    """Run every dependency validator over *fields*, keeping failures in order."""
    errors = tuple(
        error for validator in dependency_validators if (error := validator(fields)) is not None
    )
    if errors:
        logger.debug(
            "Dependency errors: %s",
            ", ".join(f"{e.source_field}->{e.target_field}" for e in errors),
        )
    return errors


def distribute(
    fields: Mapping[str, Field],
    errors: Iterable[DependencyError],
) -> dict[str, tuple[DependencyError, ...]]:
    """Group *errors* by target field, with an entry for every field.

    Errors aimed at a field the form does not have are dropped.
    """
    grouped: dict[str, list[DependencyError]] = {name: [] for name in fields}
    for error in errors:
        bucket = grouped.get(error.target_field)
        if bucket is not None:
            bucket.append(error)
    return {name: tuple(bucket) for name, bucket in grouped.items()}
