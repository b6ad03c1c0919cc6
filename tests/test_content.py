# ============================================================================
# CONTENT VALIDATOR TESTS
# ============================================================================
# STATUS: Tests - Literal and programmable content checks
# PURPOSE: Verify exact matching, predicate coercion and failure messages
# CREATED: 18 OCT 2026
# ============================================================================
"""
Content Validator Tests

Run with:
    pytest tests/test_content.py -v
"""

import asyncio

import httpx
import pytest

from health.content import (
    ContentCheckResult,
    LiteralContentValidator,
    PredicateContentValidator,
)


def _response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=body)


class TestContentCheckResult:
    """Tests for ContentCheckResult construction and coercion."""

    def test_expected(self):
        result = ContentCheckResult.expected()
        assert result.is_valid
        assert result.reason is None

    def test_unexpected(self):
        result = ContentCheckResult.unexpected("missing field")
        assert not result.is_valid
        assert result.reason == "missing field"

    @pytest.mark.parametrize("value,is_valid,reason", [
        (True, True, None),
        (False, False, None),
        ((True, None), True, None),
        ((False, "bad body"), False, "bad body"),
    ])
    def test_coerce(self, value, is_valid, reason):
        result = ContentCheckResult.coerce(value)
        assert result.is_valid is is_valid
        assert result.reason == reason

    def test_coerce_passthrough(self):
        original = ContentCheckResult.unexpected("x")
        assert ContentCheckResult.coerce(original) is original

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError):
            ContentCheckResult.coerce("yes")


class TestLiteralContentValidator:
    """Exact, case- and whitespace-sensitive equality."""

    @pytest.mark.parametrize("body,is_valid", [
        ("a", True),
        ("A", False),
        ("a ", False),
        ("", False),
    ])
    def test_exact_match(self, body, is_valid):
        validator = LiteralContentValidator("a")
        result = asyncio.run(validator.validate(_response(body)))
        assert result.is_valid is is_valid

    def test_empty_expected_content(self):
        validator = LiteralContentValidator("")
        assert asyncio.run(validator.validate(_response(""))).is_valid

    def test_failure_message(self):
        validator = LiteralContentValidator("pong")
        message = validator.describe_failure(2, ContentCheckResult.unexpected("x"), "ping")

        assert message == (
            "Discover endpoint #2 is not responding with content pong, "
            "the current content is ping."
        )


class TestPredicateContentValidator:
    """Sync and async predicates over the response."""

    def test_sync_predicate(self):
        validator = PredicateContentValidator(lambda r: r.text.startswith("ok"))

        assert asyncio.run(validator.validate(_response("ok then"))).is_valid
        assert not asyncio.run(validator.validate(_response("nope"))).is_valid

    def test_async_predicate(self):
        async def has_version(response):
            if "version" in response.json():
                return ContentCheckResult.expected()
            return ContentCheckResult.unexpected("version missing")

        validator = PredicateContentValidator(has_version)

        ok = asyncio.run(validator.validate(_response('{"version": "1.2"}')))
        bad = asyncio.run(validator.validate(_response('{"name": "api"}')))

        assert ok.is_valid
        assert not bad.is_valid
        assert bad.reason == "version missing"

    def test_tuple_predicate(self):
        validator = PredicateContentValidator(lambda r: (False, "Url property didn't match."))
        result = asyncio.run(validator.validate(_response("{}")))

        assert not result.is_valid
        assert result.reason == "Url property didn't match."

    def test_predicate_exception_propagates(self):
        def broken(response):
            raise RuntimeError("predicate blew up")

        validator = PredicateContentValidator(broken)
        with pytest.raises(RuntimeError):
            asyncio.run(validator.validate(_response("x")))

    def test_failure_message(self):
        validator = PredicateContentValidator(lambda r: False)
        message = validator.describe_failure(
            0, ContentCheckResult.unexpected("X"), "actual body"
        )

        assert message == (
            "Discover endpoint #0 is not responding with expected content, "
            "reason: 'X'. The current content is actual body."
        )

    def test_plain_false_gets_named_reason(self):
        def requires_ok(response):
            return response.text == "ok"

        validator = PredicateContentValidator(requires_ok)
        result = asyncio.run(validator.validate(_response("body")))
        message = validator.describe_failure(3, result, "body")

        assert not result.is_valid
        assert result.reason == (
            "TestPredicateContentValidator.test_plain_false_gets_named_reason."
            "<locals>.requires_ok rejected the content"
        )
        assert "reason: 'None'" not in message
        assert "requires_ok rejected the content" in message
