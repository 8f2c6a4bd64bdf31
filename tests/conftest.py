import os
import tempfile

import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="group-security-logs-"))

from GroupSecurity.action_rate_limiting import ActionRateLimiter  # noqa: E402


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return ActionRateLimiter(clock=clock)


@pytest.fixture
def valid_group():
    return {
        "name": "My Group",
        "description": "This is a long enough description.",
        "category": "Coding",
        "privacy": "public",
    }
