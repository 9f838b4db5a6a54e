"""Tests for quickpay.models.errors."""

from __future__ import annotations

import pytest

from quickpay.models.errors import (
    APIError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
    QuickPayError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
)


class TestAPIError:
    def test_fields(self):
        err = APIError("Payment Required", 402, '{"message":"declined"}')
        assert err.message == "Payment Required"
        assert err.status_code == 402
        assert err.response_body == '{"message":"declined"}'
        assert str(err) == "[402] Payment Required"

    def test_json_body(self):
        assert APIError("x", 400, '{"errors":{"amount":["too big"]}}').json() == {
            "errors": {"amount": ["too big"]}
        }

    def test_non_json_body_kept_verbatim(self):
        err = APIError.from_response(502, "Bad Gateway", "<html>upstream</html>")
        assert err.response_body == "<html>upstream</html>"
        assert err.json() is None

    def test_to_dict_shape(self):
        as_dict = APIError("m", 400, "b").to_dict()
        assert as_dict["error"] == {"status_code": 400, "message": "m", "response_body": "b"}


class TestFromResponse:
    @pytest.mark.parametrize(
        "status,expected",
        [
            (400, APIError),
            (401, AuthenticationError),
            (402, PaymentRequiredError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, APIError),
            (429, RateLimitError),
            (500, ServerError),
            (503, ServerError),
        ],
    )
    def test_subclass_by_status(self, status, expected):
        err = APIError.from_response(status, "reason", "body")
        assert type(err) is expected
        assert isinstance(err, APIError)
        assert err.status_code == status
        assert err.message == "reason"
        assert err.response_body == "body"

    def test_missing_reason(self):
        assert APIError.from_response(418, "", "").message == "HTTP 418"


class TestExceptionCatching:
    def test_inherits_base(self):
        with pytest.raises(QuickPayError):
            raise NotFoundError("Not Found", 404, "")

    def test_decode_error_is_not_api_error(self):
        err = ResponseDecodeError("bad", 200, "x")
        assert isinstance(err, QuickPayError)
        assert not isinstance(err, APIError)
