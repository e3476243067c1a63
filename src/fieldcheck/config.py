"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Form configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(error_separator="; ", no_errors_text="")
    """

    # Run dependency validators when the form is first built, not only
    # after the first update. False keeps a fresh form valid even when its
    # cross-field rules would fail.
    validate_dependencies_on_init: bool = True

    # Display
    error_separator: str = ", "
    no_errors_text: str = "No errors"


DEFAULT_CONFIG = FormConfig()
