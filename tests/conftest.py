# ==============================================================================
# Shared Test Fixtures
# ==============================================================================
"""
Pytest fixtures shared across all test modules.

Provides:
- Access log lines built from (user id, epoch seconds) pairs
- Log files written into a per-test temporary directory
- Clean settings per test (no SESSIONTOP_* environment leakage)
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

from sessiontop.utils.config import get_settings

# Base timestamp: 15/Aug/2016:23:59:20 -0500
T0 = 1471323560

LOG_TZ = timezone(timedelta(hours=-5))

HEALTH_CHECK = (
    '10.10.2.104 - - 16/Aug/2016:00:00:18 -0500 "GET / HTTP/1.1" 200 - "-" '
    '"ELB-HealthChecker/1.0i" 0 "-" -'
)


def log_line(user_id: str, timestamp: int, method: str = "GET") -> str:
    """Build an access log line for a request by ``user_id`` at ``timestamp``."""
    when = datetime.fromtimestamp(timestamp, tz=LOG_TZ).strftime("%d/%b/%Y:%H:%M:%S %z")
    return (
        f'10.10.6.90 - - {when} "{method} /ecf8427e/b443dc7f/{user_id}/174ef735 HTTP/1.0" '
        f'200 - "-" "-" 7 "10.10.1.231, 10.10.6.90" -'
    )


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop SESSIONTOP_* variables and the cached Settings around each test."""
    for key in list(os.environ):
        if key.startswith("SESSIONTOP_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def write_log(tmp_path):
    """Write a log file of requests, returning its path.

    Usage:
        path = write_log("a.log", [("71f28176", T0), ("71f28176", T0 + 6)])
        path = write_log("a.log", [...], extra=["garbage"])
        path = write_log("a.log", [...], directory="dir1")
    """

    def _write(name, requests, extra=(), directory=None):
        folder = tmp_path / directory if directory else tmp_path
        folder.mkdir(parents=True, exist_ok=True)
        lines = [log_line(user_id, ts) for user_id, ts in requests]
        lines.extend(extra)
        path = folder / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def two_logs(write_log):
    """An early and a late log file, chronological within each file.

    Expected summary at threshold 600, either file order:
        489f3e87  pages 4  sessions 2  longest 10  shortest 1
        71f28176  pages 3  sessions 2  longest 6   shortest 1
        b3a60c78  pages 1  sessions 1  longest 1   shortest 1
    """
    early = write_log(
        "early.log",
        [
            ("71f28176", T0),
            ("b3a60c78", T0 + 1),
            ("71f28176", T0 + 6),
            ("489f3e87", T0 + 20),
        ],
        extra=[HEALTH_CHECK, "garbage"],
    )
    late = write_log(
        "late.log",
        [
            ("489f3e87", T0 + 3000),
            ("489f3e87", T0 + 3005),
            ("489f3e87", T0 + 3010),
            ("71f28176", T0 + 3100),
        ],
    )
    return early, late


@pytest.fixture()
def concurrent_logs(write_log):
    """Two server logs whose requests for one user interleave in time.

    Server 1 sees the user at T0 and T0 + 1000, server 2 at T0 + 500, which
    bridges the two into a single session of 1000 seconds.
    """
    first = write_log("server1.log", [("aaaa", T0), ("aaaa", T0 + 1000)])
    second = write_log("server2.log", [("aaaa", T0 + 500)])
    return first, second
