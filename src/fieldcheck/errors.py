"""fieldcheck exception hierarchy.

Validation failures are data (see ``fieldcheck.validation.result``), not
exceptions. The types here cover mistakes made while *building* a form:
duplicate field names, malformed rules, and the like.
"""


class FieldcheckError(Exception):
    """Base for all fieldcheck-specific errors."""


class ConfigurationError(FieldcheckError):
    """Raised when a form or rule is configured incorrectly.

    Typically raised by ``init_form()`` or a rule factory, never by
    ``update_input()``.
    """
