#!/usr/bin/env python3
# ============================================================================
# CLI URI PROBE TOOL
# ============================================================================
# STATUS: Tool - One-shot URI health probe
# PURPOSE: Exec-style liveness/readiness probe over HTTP(S) endpoints
# CREATED: 18 OCT 2026
# ============================================================================
"""
Check one or more URIs once and exit with the verdict.

Exit codes:
    0 - healthy
    1 - degraded
    2 - unhealthy

Usage:
    # Single endpoint, default GET and 200-299
    python tools/probe_uris.py https://api.example.com/health

    # Several endpoints, POST, 5 second timeout per request
    python tools/probe_uris.py https://a.example.com https://b.example.com \\
        --method POST --timeout 5

    # Exact status and body, with a header, JSON output
    python tools/probe_uris.py https://api.example.com/ping \\
        --expect-status 204 --header "X-Probe: 1" --json
"""

import argparse
import asyncio
import json
import os
import sys
from typing import List, Optional, Tuple

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import get_defaults
from core.logging import ComponentType, configure_logging, get_logger
from health import (
    HealthCheckExecutor,
    HealthCheckRegistry,
    HealthStatus,
    UriHealthCheckOptions,
    add_url_group,
)

EXIT_CODES = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}

logger = get_logger("tools.probe_uris", ComponentType.CLI)


def parse_status_range(value: str) -> Tuple[int, int]:
    """Parse '200' or '200-299' into an inclusive range."""
    try:
        if "-" in value:
            low, high = value.split("-", 1)
            return int(low), int(high)
        code = int(value)
        return code, code
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid status range: {value}")


def parse_header(value: str) -> Tuple[str, str]:
    """Parse 'Name: value' into a header pair."""
    if ":" not in value:
        raise argparse.ArgumentTypeError(f"header must be NAME:VALUE, got: {value}")
    name, header_value = value.split(":", 1)
    return name.strip(), header_value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Probe HTTP(S) endpoints and exit with a health verdict",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s https://api.example.com/health
  %(prog)s https://a.example.com https://b.example.com --timeout 5
  %(prog)s https://api.example.com/ping --expect-status 204 --json
        """,
    )
    parser.add_argument("uris", nargs="+", help="URIs to check, in order")
    parser.add_argument("--method", help="HTTP method (default: GET)")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument(
        "--expect-status",
        type=parse_status_range,
        help="Expected status code or inclusive range, e.g. 200 or 200-299",
    )
    parser.add_argument("--expect-content", help="Exact expected response body")
    parser.add_argument(
        "--header",
        type=parse_header,
        action="append",
        default=[],
        help="Header added to every request (repeatable), e.g. 'X-Probe: 1'",
    )
    parser.add_argument("--name", help="Check name used in logs")
    parser.add_argument("--degraded", action="store_true", help="Report failures as degraded")
    parser.add_argument("--json", action="store_true", help="Print the verdict as JSON")
    return parser


def configure_options(args: argparse.Namespace, options: UriHealthCheckOptions) -> UriHealthCheckOptions:
    """Apply the command-line expectations to a check set builder."""
    if args.method:
        options.use_http_method(args.method)
    if args.timeout is not None:
        options.use_timeout(args.timeout)
    if args.expect_status:
        options.expect_http_codes(*args.expect_status)
    if args.expect_content is not None:
        options.expect_content(args.expect_content)

    def with_headers(uri_options):
        for name, value in args.header:
            uri_options.add_custom_header(name, value)

    for uri in args.uris:
        options.add_uri(uri, with_headers)
    return options


async def probe(args: argparse.Namespace, client_factory=None):
    """Register the probe and run it once."""
    registry = HealthCheckRegistry()
    name = args.name or get_defaults().uri_checks.registration_name
    logger.info(f"Probing {len(args.uris)} URI(s) as '{name}'")

    add_url_group(
        registry,
        lambda options: configure_options(args, options),
        name=name,
        failure_status=HealthStatus.DEGRADED if args.degraded else HealthStatus.UNHEALTHY,
        client_factory=client_factory,
    )
    return await HealthCheckExecutor(registry).execute_single(name)


def main(argv: Optional[List[str]] = None, client_factory=None) -> int:
    args = build_parser().parse_args(argv)

    log_defaults = get_defaults().logging
    configure_logging(
        level=log_defaults.level,
        json_output=log_defaults.json_output,
        stream=sys.stderr,
    )

    result = asyncio.run(probe(args, client_factory))

    if args.json:
        print(json.dumps(result.to_dict(), default=str))
    else:
        line = result.status.value.upper()
        if result.message:
            line += f": {result.message}"
        print(line)

    return EXIT_CODES[result.status]


if __name__ == "__main__":
    sys.exit(main())
