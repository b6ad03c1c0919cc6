# ============================================================================
# RESPONSE CONTENT VALIDATORS
# ============================================================================
# STATUS: Infrastructure - Content acceptance strategies
# PURPOSE: Literal and programmable checks of an HTTP response body
# CREATED: 18 OCT 2026
# ============================================================================
"""
Response Content Validators

Two strategies, applied the same way by the URI health check:
- LiteralContentValidator: body text must equal an expected string exactly
- PredicateContentValidator: user callable accepts or rejects the response

A predicate receives the httpx.Response and returns a ContentCheckResult.
Plain bools and (is_valid, reason) tuples are accepted too:

    async def has_version(response: httpx.Response) -> ContentCheckResult:
        if "version" in response.json():
            return ContentCheckResult.expected()
        return ContentCheckResult.unexpected("version missing")
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

import httpx


@dataclass(frozen=True)
class ContentCheckResult:
    """Outcome of a content check: accepted, or rejected with a reason."""
    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def expected(cls) -> "ContentCheckResult":
        return cls(is_valid=True)

    @classmethod
    def unexpected(cls, reason: str) -> "ContentCheckResult":
        return cls(is_valid=False, reason=reason)

    @classmethod
    def coerce(cls, value: Any) -> "ContentCheckResult":
        """Normalize a predicate's return value."""
        if isinstance(value, ContentCheckResult):
            return value
        if isinstance(value, bool):
            return cls(is_valid=value)
        if isinstance(value, tuple) and len(value) == 2:
            is_valid, reason = value
            return cls(is_valid=bool(is_valid), reason=reason)
        raise TypeError(
            f"Content check must return ContentCheckResult, bool or "
            f"(bool, reason), got {type(value).__name__}"
        )


ContentCheckFunc = Callable[
    [httpx.Response],
    Union[ContentCheckResult, bool, tuple, Awaitable[Any]],
]


class ContentValidator(ABC):
    """Accepts or rejects a response body."""

    @abstractmethod
    async def validate(self, response: httpx.Response) -> ContentCheckResult:
        pass

    @abstractmethod
    def describe_failure(self, index: int, result: ContentCheckResult, actual: str) -> str:
        """Diagnostic message for a rejected response at endpoint #index."""
        pass


class LiteralContentValidator(ContentValidator):
    """Exact, case- and whitespace-sensitive comparison with the body text."""

    def __init__(self, expected: str):
        self.expected = expected

    async def validate(self, response: httpx.Response) -> ContentCheckResult:
        if response.text == self.expected:
            return ContentCheckResult.expected()
        return ContentCheckResult.unexpected("content mismatch")

    def describe_failure(self, index: int, result: ContentCheckResult, actual: str) -> str:
        return (
            f"Discover endpoint #{index} is not responding with content {self.expected}, "
            f"the current content is {actual}."
        )

    def __repr__(self) -> str:
        return f"LiteralContentValidator(expected={self.expected!r})"


class PredicateContentValidator(ContentValidator):
    """Delegates to a sync or async user predicate over the response."""

    def __init__(self, func: ContentCheckFunc):
        self.func = func

    async def validate(self, response: httpx.Response) -> ContentCheckResult:
        outcome = self.func(response)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        result = ContentCheckResult.coerce(outcome)
        if not result.is_valid and not result.reason:
            return ContentCheckResult.unexpected(f"{self.func_name} rejected the content")
        return result

    @property
    def func_name(self) -> str:
        return getattr(self.func, "__qualname__", repr(self.func))

    def describe_failure(self, index: int, result: ContentCheckResult, actual: str) -> str:
        return (
            f"Discover endpoint #{index} is not responding with expected content, "
            f"reason: '{result.reason}'. The current content is {actual}."
        )

    def __repr__(self) -> str:
        return f"PredicateContentValidator({self.func_name})"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ContentCheckResult",
    "ContentCheckFunc",
    "ContentValidator",
    "LiteralContentValidator",
    "PredicateContentValidator",
]
