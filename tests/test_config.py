"""Tests for fieldcheck.config — FormConfig frozen dataclass."""

import pytest

from fieldcheck.config import DEFAULT_CONFIG, FormConfig


class TestFormConfig:
    def test_defaults(self) -> None:
        cfg = FormConfig()

        assert cfg.validate_dependencies_on_init is True
        assert cfg.error_separator == ", "
        assert cfg.no_errors_text == "No errors"

    def test_override(self) -> None:
        cfg = FormConfig(validate_dependencies_on_init=False, no_errors_text="")

        assert cfg.validate_dependencies_on_init is False
        assert cfg.no_errors_text == ""

    def test_frozen(self) -> None:
        cfg = FormConfig()

        with pytest.raises(AttributeError):
            cfg.error_separator = "; "  # type: ignore[misc]

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == FormConfig()
