"""Form state and the update engine.

A ``Form`` is an immutable snapshot: every field's current input, its rule
errors, the cross-field errors attached to it, and whether the whole form
is valid. Updating a field returns a new snapshot with everything derived
from the inputs recomputed::

    form = init_form(
        {
            "password": [existence, min_length(8)],
            "password_confirmation": [existence],
        },
        [have_same_value("password", "password_confirmation")],
    )
    form = update_input(form, "password", "hunter22")
    form.errors_for("password_confirmation")
    # (DoesNotExist(), NotSameValue("password"))

Invariant: ``form.valid`` is True exactly when no field has rule errors or
dependency errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from types import MappingProxyType

from fieldcheck.config import DEFAULT_CONFIG, FormConfig
from fieldcheck.errors import ConfigurationError
from fieldcheck.messages import error_message, errors_to_display_string
from fieldcheck.validation import validate_field
from fieldcheck.validation.dependencies import (
    DependencyValidator,
    distribute,
    validate_dependencies,
)
from fieldcheck.validation.result import DependencyError, ValidationError
from fieldcheck.validation.rules import Validator

logger = logging.getLogger("fieldcheck.form")


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Declaration of one form field: its name and ordered rules.

    ``dependencies`` are cross-field rules declared alongside the field;
    they are added to the form's dependency validators in declaration order.
    """

    name: str
    validators: tuple[Validator, ...] = ()
    dependencies: tuple[DependencyValidator, ...] = ()


@dataclass(frozen=True, slots=True)
class Field:
    """One named input and its current validation state."""

    name: str
    input: str = ""
    errors: tuple[ValidationError, ...] = ()
    dependency_errors: tuple[DependencyError, ...] = ()
    validators: tuple[Validator, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors and not self.dependency_errors

    def with_input(self, value: str) -> Field:
        """Return a copy holding *value* with its rule errors recomputed."""
        return replace(self, input=value, errors=validate_field(value, self.validators))


@dataclass(frozen=True, slots=True)
class Form:
    """Immutable snapshot of a form's inputs and validation state.

    The form is falsy when invalid, so you can write::

        if not form:
            return Template("signup.html", form=form)

    ``fields`` is a read-only mapping. ``dependency_errors`` lists every
    cross-field error currently attached to a field, in dependency-validator
    order. Forms compare by value but are not hashable.
    """

    fields: Mapping[str, Field]
    dependency_validators: tuple[DependencyValidator, ...] = ()
    dependency_errors: tuple[DependencyError, ...] = ()
    valid: bool = True
    config: FormConfig = DEFAULT_CONFIG

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_valid(self) -> bool:
        return self.valid

    def __bool__(self) -> bool:
        return self.valid

    def update(self, name: str, value: str) -> Form:
        """Return a new form with field *name* set to *value*."""
        return update_input(self, name, value)

    def value(self, name: str) -> str:
        """Current input of field *name*, or ``""`` if there is no such field."""
        return field_value(self, name)

    def errors_for(self, name: str) -> tuple[ValidationError, ...]:
        """Rule errors of field *name* followed by the cross-field errors it takes part in."""
        return field_errors(self, name)

    def display(self, name: str) -> str:
        """Errors of field *name* as a single display string."""
        return errors_to_display_string(field_errors(self, name), self.config)

    def error_map(self) -> dict[str, list[str]]:
        """Rendered messages for every field that has errors.

        Returns the ``{field: [messages]}`` shape that template error
        helpers expect; fields without errors are left out.
        """
        result: dict[str, list[str]] = {}
        for name in self.fields:
            errors = field_errors(self, name)
            if errors:
                result[name] = [error_message(e) for e in errors]
        return result


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

type FieldSpecs = (
    Mapping[str, Sequence[Validator]]
    | Iterable[
        FieldSpec
        | tuple[str, Sequence[Validator]]
        | tuple[str, Sequence[Validator], Sequence[DependencyValidator]]
    ]
)


def init_form(
    specs: FieldSpecs,
    dependency_validators: Iterable[DependencyValidator] = (),
    *,
    config: FormConfig | None = None,
) -> Form:
    """Build a form with every field empty and validated.

    Args:
        specs: Either a mapping of field name to rules, or an iterable of
            ``FieldSpec`` objects or ``(name, rules[, dependencies])`` tuples.
        dependency_validators: Cross-field rules, applied in order after
            any declared on individual fields.
        config: Form options. Defaults to ``FormConfig()``.

    Returns:
        A ``Form`` whose fields hold ``""`` and the errors their rules
        report for it. Dependency validators run too unless
        ``config.validate_dependencies_on_init`` is False.

    Raises:
        ConfigurationError: If a field name repeats or a rule is not callable.
    """
    config = config or DEFAULT_CONFIG
    fields: dict[str, Field] = {}
    dependencies: list[DependencyValidator] = []

    for spec in _normalize_specs(specs):
        if spec.name in fields:
            msg = f"Duplicate field name: {spec.name!r}"
            raise ConfigurationError(msg)
        _check_callables(spec.validators, f"validator for field {spec.name!r}")
        fields[spec.name] = Field(name=spec.name, validators=spec.validators).with_input("")
        dependencies.extend(spec.dependencies)

    dependencies.extend(dependency_validators)
    _check_callables(dependencies, "dependency validator")

    logger.debug("Initialized form with fields: %s", ", ".join(fields) or "(none)")
    return _settle(
        fields,
        tuple(dependencies),
        config,
        run_dependencies=config.validate_dependencies_on_init,
    )


def _normalize_specs(specs: FieldSpecs) -> list[FieldSpec]:
    if isinstance(specs, Mapping):
        return [
            FieldSpec(name, _as_tuple(rules, f"rules for field {name!r}"))
            for name, rules in specs.items()
        ]

    normalized: list[FieldSpec] = []
    for spec in specs:
        match spec:
            case FieldSpec():
                normalized.append(spec)
            case (str() as name, rules):
                normalized.append(FieldSpec(name, _as_tuple(rules, f"rules for field {name!r}")))
            case (str() as name, rules, deps):
                normalized.append(
                    FieldSpec(
                        name,
                        _as_tuple(rules, f"rules for field {name!r}"),
                        _as_tuple(deps, f"dependencies for field {name!r}"),
                    )
                )
            case _:
                msg = f"Invalid field spec: {spec!r}"
                raise ConfigurationError(msg)
    return normalized


def _as_tuple(items: object, what: str) -> tuple:
    """Turn a list of rules into a tuple, rejecting a bare rule or string."""
    if callable(items) or isinstance(items, str) or not isinstance(items, Iterable):
        msg = f"The {what} must be a list, got {items!r}"
        raise ConfigurationError(msg)
    return tuple(items)


def _check_callables(items: Iterable[object], what: str) -> None:
    for item in items:
        if not callable(item):
            msg = f"Each {what} must be callable, got {item!r}"
            raise ConfigurationError(msg)


# ---------------------------------------------------------------------------
# Update engine
# ---------------------------------------------------------------------------


def update_input(form: Form, name: str, value: str) -> Form:
    """Set field *name* to *value* and recompute all derived state.

    The field's rule errors are recomputed, every dependency validator is
    re-run over the updated fields, and the resulting errors are attached
    to their target fields from scratch.

    Unknown field names are ignored: the same form is returned.
    """
    field = form.fields.get(name)
    if field is None:
        logger.debug("Ignoring update for unknown field %r", name)
        return form

    fields = {**form.fields, name: field.with_input(value)}
    return _settle(fields, form.dependency_validators, form.config, run_dependencies=True)


def populate(form: Form, data: Mapping[str, str]) -> Form:
    """Apply ``update_input`` for every item of *data*.

    Accepts any mapping of field names to strings, such as submitted form
    data. Keys that are not fields of the form are ignored.
    """
    for name, value in data.items():
        form = update_input(form, name, value)
    return form


def reset(form: Form) -> Form:
    """Return a fresh form with the same rules and every input cleared."""
    fields = {name: field.with_input("") for name, field in form.fields.items()}
    return _settle(
        fields,
        form.dependency_validators,
        form.config,
        run_dependencies=form.config.validate_dependencies_on_init,
    )


def _settle(
    fields: dict[str, Field],
    dependency_validators: tuple[DependencyValidator, ...],
    config: FormConfig,
    *,
    run_dependencies: bool,
) -> Form:
    """Attach dependency errors to their targets and compute validity."""
    attached: tuple[DependencyError, ...] = ()
    if run_dependencies:
        found = validate_dependencies(fields, dependency_validators)
        attached = tuple(e for e in found if e.target_field in fields)
        if len(attached) != len(found):
            logger.debug(
                "Dropped %d dependency error(s) aimed at unknown fields",
                len(found) - len(attached),
            )

    by_target = distribute(fields, attached)
    fields = {
        name: replace(field, dependency_errors=by_target[name])
        for name, field in fields.items()
    }
    return Form(
        fields=MappingProxyType(fields),
        dependency_validators=dependency_validators,
        dependency_errors=attached,
        valid=all(field.is_valid for field in fields.values()),
        config=config,
    )


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def field_value(form: Form, name: str) -> str:
    """Current input of field *name*, or ``""`` if the form has no such field."""
    field = form.fields.get(name)
    if field is None:
        return ""
    return field.input


def field_errors(form: Form, name: str) -> tuple[ValidationError, ...]:
    """Errors to show for field *name*.

    The field's own rule errors come first, followed by each attached
    dependency error whose source *or* target is *name*, so both ends of
    a cross-field rule can display the message. Unknown names give ``()``.
    """
    field = form.fields.get(name)
    if field is None:
        return ()
    shared = tuple(e.error for e in form.dependency_errors if e.involves(name))
    return field.errors + shared


def is_valid(form: Form) -> bool:
    """True when no field has rule errors or dependency errors."""
    return form.valid
