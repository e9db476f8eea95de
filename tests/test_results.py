import pytest
from pydantic import ValidationError

from roman_converter.common.results import (
    CONVERSION_RESULT_ADAPTER,
    ConversionFailure,
    ConversionSuccess,
    ErrorKind,
    ValidationIssue,
)


def test_success_has_no_error():
    result = ConversionSuccess(value=14)
    assert result.ok
    assert result.error is None
    assert result.model_dump() == {"status": "success", "value": 14}


def test_failure_from_issue():
    issue = ValidationIssue(ErrorKind.TOO_LARGE, "too large")
    result = ConversionFailure.from_issue(issue, "")
    assert not result.ok
    assert result.value == ""
    assert result.kind == ErrorKind.TOO_LARGE
    assert result.error == "too large"


def test_results_are_frozen():
    result = ConversionSuccess(value="XIV")
    with pytest.raises(ValidationError):
        result.value = "XV"


def test_adapter_picks_variant_from_status():
    success = CONVERSION_RESULT_ADAPTER.validate_python({"status": "success", "value": "XIV"})
    failure = CONVERSION_RESULT_ADAPTER.validate_python(
        {"status": "error", "value": 0, "kind": "malformed_format", "error": "bad"}
    )
    assert isinstance(success, ConversionSuccess)
    assert isinstance(failure, ConversionFailure)
    assert failure.kind is ErrorKind.MALFORMED_FORMAT


def test_adapter_json_round_trip():
    result = ConversionFailure(value=0, kind=ErrorKind.EMPTY_INPUT, error="Please enter a number")
    payload = CONVERSION_RESULT_ADAPTER.dump_json(result)
    assert CONVERSION_RESULT_ADAPTER.validate_json(payload) == result


def test_failure_requires_an_error():
    with pytest.raises(ValidationError):
        CONVERSION_RESULT_ADAPTER.validate_python({"status": "error", "value": 0})
