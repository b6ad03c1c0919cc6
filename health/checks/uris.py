# ============================================================================
# URI HEALTH CHECK
# ============================================================================
# STATUS: Infrastructure - HTTP(S) endpoint evaluation
# PURPOSE: Ordered, cancellable request/validate loop over a URI check set
# CREATED: 18 OCT 2026
# DEPENDENCIES: httpx
# ============================================================================
"""
URI Health Check

Evaluates every endpoint of a UriCheckSet in declaration order and reports
one verdict:

1. Stop with "execution is cancelled" if the caller already cancelled
2. Resolve effective settings (target override, else check-wide default)
3. Send the request under a deadline: the earlier of the resolved timeout
   and the caller's cancellation signal
4. Validate the status code against the inclusive range
5. Validate literal content, then the content predicate

The first failure of any kind ends the evaluation; later endpoints are
never requested. Transport errors (connection, DNS, TLS, deadline) become
failure results carrying the original exception.
"""

import time
from typing import Optional, Union

import httpx

from core.logging import ComponentType, get_logger, log_context
from health.cancellation import CancellationScope, cancelled_message
from health.core import (
    HealthCheckContext,
    HealthCheckPlugin,
    HealthCheckResult,
)
from health.http_client import ClientFactory
from health.uri_options import ResolvedEndpoint, UriCheckSet, UriHealthCheckOptions

logger = get_logger(__name__, ComponentType.HEALTH_CHECK)

class UriHealthCheck(HealthCheckPlugin):
    """
    Health check over one or more HTTP(S) endpoints.

    The check set is frozen at construction, so one instance can be
    evaluated repeatedly and concurrently. Each evaluation obtains its own
    client from client_factory and closes it when done.
    """

    name = "uri-group"

    def __init__(
        self,
        options: Union[UriCheckSet, UriHealthCheckOptions],
        client_factory: ClientFactory,
        name: Optional[str] = None,
    ):
        if options is None:
            raise ValueError("options is required")
        if client_factory is None:
            raise ValueError("client_factory is required")

        if isinstance(options, UriHealthCheckOptions):
            options = options.build()
        self.check_set: UriCheckSet = options
        self._client_factory = client_factory
        if name:
            self.name = name

    async def check(self, context: Optional[HealthCheckContext] = None) -> HealthCheckResult:
        if context is None:
            context = HealthCheckContext.for_plugin(self)
        failure_status = context.failure_status

        index = 0
        client: Optional[httpx.AsyncClient] = None

        with log_context(check_name=context.registration.name, operation="uri_check"):
            try:
                for endpoint in self.check_set.resolved():
                    if context.cancellation.is_set():
                        logger.warning(
                            f"Cancelled before endpoint #{index}, "
                            f"{len(self.check_set) - index} endpoint(s) not checked"
                        )
                        return HealthCheckResult.failure(
                            failure_status,
                            cancelled_message(context.registration.name),
                            endpoint_index=index,
                        )

                    if client is None:
                        client = self._client_factory()

                    with log_context(endpoint_index=index, uri=endpoint.uri):
                        failure = await self._check_endpoint(
                            client, endpoint, index, context
                        )

                    if failure is not None:
                        logger.warning(failure)
                        return HealthCheckResult.failure(
                            failure_status,
                            failure,
                            endpoint_index=index,
                            uri=endpoint.uri,
                        )

                    index += 1

                return HealthCheckResult.healthy(endpoints_checked=index)

            except Exception as e:
                reason = str(e) or type(e).__name__
                logger.warning(f"Endpoint #{index} request failed: {reason}")
                return HealthCheckResult.failure(
                    failure_status,
                    f"Discover endpoint #{index} request failed: {reason}",
                    exception=e,
                    endpoint_index=index,
                )

            finally:
                if client is not None:
                    await client.aclose()

    async def _check_endpoint(
        self,
        client: httpx.AsyncClient,
        endpoint: ResolvedEndpoint,
        index: int,
        context: HealthCheckContext,
    ) -> Optional[str]:
        """
        Request and validate one endpoint.

        Returns:
            None when the endpoint passes, else the failure description
        """
        request = client.build_request(
            endpoint.method,
            endpoint.uri,
            headers=list(endpoint.headers),
        )

        start = time.monotonic()
        async with CancellationScope(context.cancellation, timeout=endpoint.timeout) as scope:
            response = await scope.run(client.send(request))
        elapsed_ms = (time.monotonic() - start) * 1000

        logger.debug(
            f"{endpoint.method} {endpoint.uri} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms)"
        )

        status_range = endpoint.expected_status
        if not status_range.contains(response.status_code):
            return (
                f"Discover endpoint #{index} is not responding with code in "
                f"{status_range} range, the current status is {response.status_code}."
            )

        for validator in endpoint.validators:
            result = await validator.validate(response)
            if not result.is_valid:
                return validator.describe_failure(index, result, response.text)

        return None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "UriHealthCheck",
]
