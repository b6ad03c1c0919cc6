# ============================================================================
# URI CHECK OPTIONS TESTS
# ============================================================================
# STATUS: Tests - Endpoint specification model and builders
# PURPOSE: Verify builders, freezing and per-field default resolution
# CREATED: 18 OCT 2026
# ============================================================================
"""
URI Check Options Tests

Covers:
1. Check-wide defaults (GET, 10s, 200...299)
2. Per-target override vs fallback, for every overridable field
3. Builder ordering, from_uris and header handling
4. Frozen check sets

Run with:
    pytest tests/test_uri_options.py -v
"""

from datetime import timedelta

import httpx
import pytest
from pydantic import ValidationError

from core.config import UriCheckDefaults
from health.content import LiteralContentValidator, PredicateContentValidator
from health.uri_options import (
    CheckSetDefaults,
    EndpointCheck,
    StatusCodeRange,
    UriHealthCheckOptions,
    UriOptions,
)


def _accept(response):
    return True


def _reject(response):
    return False


def _only(options: UriHealthCheckOptions):
    """Resolve the single endpoint of a check set."""
    check_set = options.build()
    (resolved,) = list(check_set.resolved())
    return resolved


# ============================================================================
# DEFAULTS
# ============================================================================

class TestCheckSetDefaults:
    """Tests for check-wide defaults."""

    def test_builder_defaults(self):
        defaults = UriHealthCheckOptions(UriCheckDefaults()).build().defaults

        assert defaults.method == "GET"
        assert defaults.timeout == 10.0
        assert defaults.expected_status == StatusCodeRange(min_code=200, max_code=299)
        assert defaults.expected_content is None
        assert defaults.content_check is None

    def test_defaults_from_config(self):
        config = UriCheckDefaults(
            http_method="head",
            timeout_seconds=3.0,
            expected_status_min=200,
            expected_status_max=204,
        )
        defaults = UriHealthCheckOptions(config).build().defaults

        assert defaults.method == "HEAD"
        assert defaults.timeout == 3.0
        assert str(defaults.expected_status) == "200...204"

    def test_defaults_from_env(self, monkeypatch):
        monkeypatch.setenv("URI_HEALTH_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("URI_HEALTH_HTTP_METHOD", "post")
        monkeypatch.setenv("URI_HEALTH_EXPECTED_STATUS_MAX", "399")

        config = UriCheckDefaults.from_env()

        assert config.timeout_seconds == 2.5
        assert config.http_method == "POST"
        assert config.expected_status == (200, 399)

    def test_model_defaults(self):
        defaults = CheckSetDefaults()
        assert defaults.method == "GET"
        assert defaults.timeout == 10.0
        assert str(defaults.expected_status) == "200...299"


# ============================================================================
# RESOLUTION
# ============================================================================

class TestResolution:
    """Each overridable field: explicit override wins, unset falls back."""

    def test_method_falls_back(self):
        resolved = _only(UriHealthCheckOptions().use_post().add_uri("http://a/"))
        assert resolved.method == "POST"

    def test_method_override(self):
        resolved = _only(
            UriHealthCheckOptions().use_post().add_uri("http://a/", lambda u: u.use_get())
        )
        assert resolved.method == "GET"

    def test_arbitrary_method_is_uppercased(self):
        resolved = _only(
            UriHealthCheckOptions().add_uri("http://a/", lambda u: u.use_http_method("options"))
        )
        assert resolved.method == "OPTIONS"

    def test_timeout_falls_back(self):
        resolved = _only(UriHealthCheckOptions().use_timeout(4).add_uri("http://a/"))
        assert resolved.timeout == 4.0

    def test_timeout_override(self):
        resolved = _only(
            UriHealthCheckOptions().use_timeout(4).add_uri("http://a/", lambda u: u.use_timeout(1.5))
        )
        assert resolved.timeout == 1.5

    def test_zero_timeout_is_an_override(self):
        """Zero is a real timeout, not the unset marker."""
        resolved = _only(
            UriHealthCheckOptions().use_timeout(4).add_uri("http://a/", lambda u: u.use_timeout(0))
        )
        assert resolved.timeout == 0.0

    def test_timedelta_timeout(self):
        resolved = _only(
            UriHealthCheckOptions().add_uri(
                "http://a/", lambda u: u.use_timeout(timedelta(milliseconds=250))
            )
        )
        assert resolved.timeout == 0.25

    def test_status_range_falls_back(self):
        resolved = _only(UriHealthCheckOptions().expect_http_codes(200, 399).add_uri("http://a/"))
        assert resolved.expected_status == StatusCodeRange.between(200, 399)

    def test_status_code_override(self):
        resolved = _only(
            UriHealthCheckOptions()
            .expect_http_codes(200, 399)
            .add_uri("http://a/", lambda u: u.expect_http_code(418))
        )
        assert resolved.expected_status == StatusCodeRange.single(418)

    def test_content_falls_back(self):
        resolved = _only(UriHealthCheckOptions().expect_content("ok").add_uri("http://a/"))

        (validator,) = resolved.validators
        assert isinstance(validator, LiteralContentValidator)
        assert validator.expected == "ok"

    def test_content_override(self):
        resolved = _only(
            UriHealthCheckOptions()
            .expect_content("ok")
            .add_uri("http://a/", lambda u: u.expect_content("pong"))
        )

        (validator,) = resolved.validators
        assert validator.expected == "pong"

    def test_content_check_falls_back(self):
        resolved = _only(UriHealthCheckOptions().expect_content_check(_accept).add_uri("http://a/"))

        (validator,) = resolved.validators
        assert isinstance(validator, PredicateContentValidator)
        assert validator.func is _accept

    def test_content_check_override(self):
        resolved = _only(
            UriHealthCheckOptions()
            .expect_content_check(_accept)
            .add_uri("http://a/", lambda u: u.expect_content_check(_reject))
        )

        (validator,) = resolved.validators
        assert validator.func is _reject

    def test_literal_and_predicate_both_apply(self):
        resolved = _only(
            UriHealthCheckOptions()
            .expect_content("ok")
            .add_uri("http://a/", lambda u: u.expect_content_check(_accept))
        )

        kinds = [type(v) for v in resolved.validators]
        assert kinds == [LiteralContentValidator, PredicateContentValidator]

    def test_no_content_validators_by_default(self):
        resolved = _only(UriHealthCheckOptions().add_uri("http://a/"))
        assert resolved.validators == ()


# ============================================================================
# BUILDERS
# ============================================================================

class TestBuilders:
    """Tests for UriOptions / UriHealthCheckOptions."""

    def test_add_uri_keeps_declaration_order(self):
        check_set = (
            UriHealthCheckOptions()
            .add_uri("http://first/")
            .add_uri("http://second/")
            .add_uri("http://third/")
            .build()
        )

        assert [e.uri for e in check_set.endpoints] == [
            "http://first/", "http://second/", "http://third/",
        ]
        assert len(check_set) == 3

    def test_from_uris(self):
        check_set = UriHealthCheckOptions.from_uris(
            ["http://b/", httpx.URL("http://a/")]
        ).build()

        assert [e.uri for e in check_set.endpoints] == ["http://b/", "http://a/"]
        assert all(e.method is None for e in check_set.endpoints)
        assert all(e.timeout is None for e in check_set.endpoints)

    def test_headers_kept_in_order_with_duplicates(self):
        endpoint = (
            UriOptions("http://a/")
            .add_custom_header("X-Trace", "1")
            .add_custom_header("Accept", "text/plain")
            .add_custom_header("X-Trace", "2")
            .build()
        )

        assert endpoint.headers == (
            ("X-Trace", "1"),
            ("Accept", "text/plain"),
            ("X-Trace", "2"),
        )

    def test_uri_is_required(self):
        with pytest.raises(ValueError):
            UriOptions(None)

    def test_check_set_is_frozen(self):
        check_set = UriHealthCheckOptions().add_uri("http://a/").build()

        with pytest.raises(ValidationError):
            check_set.endpoints[0].uri = "http://b/"
        with pytest.raises(ValidationError):
            check_set.defaults.timeout = 1.0

    def test_builder_changes_after_build_do_not_leak(self):
        options = UriHealthCheckOptions().add_uri("http://a/")
        check_set = options.build()

        options.use_timeout(1).add_uri("http://b/")

        assert len(check_set) == 1
        assert check_set.defaults.timeout == 10.0

    def test_endpoint_model_rejects_missing_uri(self):
        with pytest.raises(ValidationError):
            EndpointCheck(uri=None)


class TestStatusCodeRange:
    """Inclusive range semantics."""

    @pytest.mark.parametrize("code,expected", [
        (199, False),
        (200, True),
        (250, True),
        (299, True),
        (300, False),
    ])
    def test_inclusive_bounds(self, code, expected):
        assert StatusCodeRange.between(200, 299).contains(code) is expected

    def test_single_code(self):
        status_range = StatusCodeRange.single(204)

        assert status_range.contains(204)
        assert not status_range.contains(203)
        assert not status_range.contains(205)
        assert str(status_range) == "204...204"
