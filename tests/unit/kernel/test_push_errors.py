"""Unit tests for the push adapter error hierarchy."""

from __future__ import annotations

import json

import pytest

from onesignal_push.application.notifications import Platform
from onesignal_push.config import ConfigurationError
from onesignal_push.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    TransportFailure,
    UnsupportedPlatformError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]
        assert isinstance(err.__cause__, ValueError)

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        assert json.loads(str(err)) == {"code": "oops", "message": "oops", "detail": {"x": 1}}

    def test_log_context_is_flat(self) -> None:
        err = TransportFailure("onesignal", "HTTP 500", status_code=500, detail={"platform": "ios"})
        assert err.log_context() == {
            "error_code": "transport_failure",
            "error": "HTTP 500",
            "platform": "ios",
        }

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestHierarchy:
    def test_configuration_error_is_application_error(self) -> None:
        assert issubclass(ConfigurationError, ApplicationError)
        assert ConfigurationError("x").code == "configuration_error"

    def test_unsupported_platform(self) -> None:
        err = UnsupportedPlatformError("web")
        assert isinstance(err, DomainError)
        assert err.platform == "web"
        assert err.code == "unsupported_platform"

    def test_transport_failure(self) -> None:
        err = TransportFailure("onesignal", "HTTP 502", status_code=502, response_body="gw")
        assert isinstance(err, ExternalServiceError)
        assert isinstance(err, InfrastructureError)
        assert err.status_code == 502
        assert err.response_body == "gw"
        assert err.to_dict()["code"] == "transport_failure"

    def test_transport_failure_default_message(self) -> None:
        assert TransportFailure("onesignal").message == "External service 'onesignal' error"


class TestPlatformParse:
    def test_known(self) -> None:
        assert Platform.parse("ios") is Platform.IOS
        assert Platform.ANDROID.token_field == "include_android_reg_ids"
        assert Platform.IOS.token_field == "include_ios_tokens"

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnsupportedPlatformError):
            Platform.parse("web")
