"""Tests for fieldcheck.errors — exception hierarchy."""

from fieldcheck.errors import ConfigurationError, FieldcheckError


class TestHierarchy:
    def test_configuration_error_is_fieldcheck_error(self) -> None:
        assert issubclass(ConfigurationError, FieldcheckError)

    def test_fieldcheck_error_is_exception(self) -> None:
        assert issubclass(FieldcheckError, Exception)

    def test_message(self) -> None:
        err = ConfigurationError("Duplicate field name: 'email'")
        assert str(err) == "Duplicate field name: 'email'"
