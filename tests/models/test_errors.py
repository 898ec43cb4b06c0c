"""Tests for error payload models."""

import pytest
from pydantic import ValidationError

from netrequest.models.errors import (
    ErrorDetail,
    ErrorListResponse,
    StatusErrorResponse,
    payload_message,
)


class TestStatusErrorResponse:
    def test_decode(self):
        """Should decode a well-formed body."""
        payload = StatusErrorResponse.model_validate_json(
            '{"status":"error","message":"not found","code":404}'
        )
        assert payload == StatusErrorResponse(status="error", message="not found", code=404)

    def test_missing_field(self):
        """Should reject a body missing required fields."""
        with pytest.raises(ValidationError):
            StatusErrorResponse.model_validate_json('{"status":"error"}')


class TestErrorListResponse:
    def test_decode(self):
        """Should decode the list of error details."""
        payload = ErrorListResponse.model_validate_json(
            '{"errors":[{"message":"bad","type":"validation"}]}'
        )
        assert payload.errors == [ErrorDetail(message="bad", type="validation")]

    def test_errors_may_be_absent(self):
        """Should accept an object without errors."""
        assert ErrorListResponse.model_validate_json("{}").errors is None


class TestPayloadMessage:
    def test_status_shape(self):
        """Should use the status message."""
        assert payload_message(StatusErrorResponse(status="e", message="m", code=1)) == "m"

    def test_list_shape(self):
        """Should give an empty string when the first entry has no message."""
        payload = ErrorListResponse(errors=[ErrorDetail(message=None, type="x")])
        assert payload_message(payload) == ""

    def test_none(self):
        """Should give an empty string without payload."""
        assert payload_message(None) == ""
