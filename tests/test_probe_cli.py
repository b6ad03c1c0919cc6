# ============================================================================
# PROBE CLI TESTS
# ============================================================================
# STATUS: Tests - One-shot probe tool
# PURPOSE: Verify argument parsing, exit codes and output
# CREATED: 18 OCT 2026
# ============================================================================
"""
Probe CLI Tests

Run with:
    pytest tests/test_probe_cli.py -v
"""

import argparse
import json
import logging
import sys
from typing import Dict, List

import httpx
import pytest

from tools.probe_uris import main, parse_header, parse_status_range


def _factory(routes: Dict[str, int], requests: List[httpx.Request]):
    def handler(request):
        requests.append(request)
        return httpx.Response(routes.get(str(request.url), 200), text="ok")

    transport = httpx.MockTransport(handler)
    return lambda: httpx.AsyncClient(transport=transport)


class TestParsers:
    """Argument type parsers."""

    def test_status_range(self):
        assert parse_status_range("204") == (204, 204)
        assert parse_status_range("200-399") == (200, 399)

    def test_invalid_status_range(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_status_range("ok")

    def test_header(self):
        assert parse_header("X-Probe: 1") == ("X-Probe", "1")
        assert parse_header("Authorization:Bearer a:b") == ("Authorization", "Bearer a:b")

    def test_invalid_header(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_header("no-colon")


class TestMain:
    """End-to-end runs of main() with a mocked transport."""

    @pytest.fixture(autouse=True)
    def _keep_test_logging(self, monkeypatch):
        """main() reconfigures root handlers; keep pytest's capture intact."""
        monkeypatch.setattr("tools.probe_uris.configure_logging", lambda **kwargs: None)

    def test_healthy_exit_code(self, capsys):
        requests: List[httpx.Request] = []

        code = main(
            ["http://a/", "http://b/", "--header", "X-Probe: 1"],
            client_factory=_factory({}, requests),
        )

        assert code == 0
        assert capsys.readouterr().out.strip().startswith("HEALTHY")
        assert [str(r.url) for r in requests] == ["http://a/", "http://b/"]
        assert all(r.headers["X-Probe"] == "1" for r in requests)

    def test_unhealthy_exit_code(self, capsys):
        requests: List[httpx.Request] = []

        code = main(["http://a/"], client_factory=_factory({"http://a/": 503}, requests))

        out = capsys.readouterr().out
        assert code == 2
        assert "UNHEALTHY" in out
        assert "503" in out

    def test_degraded_exit_code(self):
        requests: List[httpx.Request] = []

        code = main(
            ["http://a/", "--degraded"],
            client_factory=_factory({"http://a/": 500}, requests),
        )

        assert code == 1

    def test_expectations_and_json_output(self, capsys):
        requests: List[httpx.Request] = []

        code = main(
            [
                "http://a/",
                "--method", "post",
                "--expect-status", "204",
                "--expect-content", "ok",
                "--name", "probe",
                "--json",
            ],
            client_factory=_factory({"http://a/": 204}, requests),
        )

        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload["status"] == "healthy"
        assert requests[0].method == "POST"

    def test_logs_to_stderr_under_cli_component(self, monkeypatch, caplog, capsys):
        calls = []
        monkeypatch.setattr(
            "tools.probe_uris.configure_logging", lambda **kwargs: calls.append(kwargs)
        )
        requests: List[httpx.Request] = []

        with caplog.at_level(logging.INFO, logger="tools.probe_uris"):
            code = main(["http://a/", "--json"], client_factory=_factory({}, requests))

        assert code == 0
        assert calls[0]["stream"] is sys.stderr
        json.loads(capsys.readouterr().out)
        record = [r for r in caplog.records if r.name == "tools.probe_uris"][-1]
        assert record.getMessage() == "Probing 1 URI(s) as 'uri-group'"
        assert record.extra["component"] == "cli"
