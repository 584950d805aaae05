"""Unit tests for Result types (Success/Failure)."""

import dataclasses

import pytest

from auth_gateway.core.result import Failure, Success


@pytest.mark.unit
class TestResult:
    """Test Success and Failure containers."""

    def test_success_holds_value(self):
        result = Success(value="uid-1")

        assert result.value == "uid-1"

    def test_failure_holds_error(self):
        result = Failure(error="boom")

        assert result.error == "boom"

    def test_results_are_immutable(self):
        result = Success(value=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2  # type: ignore[misc]

    def test_results_require_keyword_arguments(self):
        with pytest.raises(TypeError):
            Success("positional")  # type: ignore[misc]

    def test_pattern_matching_selects_branch(self):
        def describe(result):
            match result:
                case Success(value=value):
                    return f"ok:{value}"
                case Failure(error=error):
                    return f"err:{error}"

        assert describe(Success(value=None)) == "ok:None"
        assert describe(Failure(error="x")) == "err:x"
