"""
Unit tests for JSON request body parsing in the API layer.
"""
import pytest

from nextra.api.v1.request_body import parse_request_body
from nextra.application.dto.log_dto import LogCreateRequest
from nextra.application.dto.verified_user_dto import CheckUserRequest
from nextra.core.exceptions import ValidationError


class TestParseRequestBody:
    """Tests for parse_request_body"""

    def test_missing_body_is_an_empty_request(self):
        request = parse_request_body(LogCreateRequest, None, "Invalid log data")
        assert request == LogCreateRequest()

    def test_valid_body(self):
        request = parse_request_body(CheckUserRequest, {"name": "bob"}, "Name required")
        assert request.name == "bob"

    @pytest.mark.parametrize("payload", [
        {"name": "Known User", "time": 1700000000000},
        ["Known User"],
        "Known User",
    ])
    def test_malformed_body_raises_validation_error(self, payload):
        with pytest.raises(ValidationError) as excinfo:
            parse_request_body(LogCreateRequest, payload, "Invalid log data")
        assert excinfo.value.user_message == "Invalid log data"
