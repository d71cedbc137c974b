"""
Pytest configuration and shared fixtures for FleetDash tests.
"""

import json
import os
import tempfile
from http import HTTPStatus
from pathlib import Path
from typing import Any, Callable, List, Tuple
from unittest.mock import Mock

import pytest
import requests

from fleetdash.core.config import ApiConfig, ConfigManager
from fleetdash.core.session import Notifier, RouteNavigator, ScheduledCall, Scheduler
from fleetdash.infrastructure.storage import MemoryTokenStore
from fleetdash.services import DashboardClient

BASE_URL = "https://fleet.example.com/api"

_MISSING = object()


class RecordingNotifier(Notifier):
    """Collects warnings instead of printing them."""

    def __init__(self):
        self.warnings: List[str] = []

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)


class _ManualCall(ScheduledCall):
    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Records scheduled callbacks; tests fire them with run_pending()."""

    def __init__(self):
        self.calls: List[Tuple[float, Callable[[], None], _ManualCall]] = []

    def call_later(self, delay_seconds, callback):
        handle = _ManualCall()
        self.calls.append((delay_seconds, callback, handle))
        return handle

    def run_pending(self) -> None:
        calls, self.calls = self.calls, []
        for _, callback, handle in calls:
            if not handle.cancelled:
                callback()


def build_response(
    status: int = 200,
    json_body: Any = _MISSING,
    text: str = None,
    content_type: str = "application/json",
    reason: str = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason if reason is not None else HTTPStatus(status).phrase
    if json_body is not _MISSING:
        response._content = json.dumps(json_body).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    if content_type:
        response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    return build_response


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    config_dir = temp_dir / ".config" / "fleetdash"
    config_dir.mkdir(parents=True)
    return config_dir / "config.toml"


@pytest.fixture
def config_manager(config_file):
    return ConfigManager(config_file)


@pytest.fixture
def api_config():
    return ApiConfig(base_url=BASE_URL, timeout=5000)


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def navigator():
    return RouteNavigator("/dashboard")


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def http_session(make_response):
    """Mocked requests.Session answering 200 with an empty JSON object."""
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def client(api_config, token_store, notifier, navigator, scheduler, http_session):
    """DashboardClient wired to fakes only."""
    return DashboardClient(
        config=api_config,
        token_store=token_store,
        notifier=notifier,
        navigator=navigator,
        scheduler=scheduler,
        session=http_session,
    )


@pytest.fixture
def clean_environment():
    """Ensure FLEETDASH_* environment variables do not leak into tests."""
    original_env = {}
    for var in list(os.environ):
        if var.startswith("FLEETDASH_"):
            original_env[var] = os.environ.pop(var)

    yield

    for var, value in original_env.items():
        os.environ[var] = value


def sent_request(session: Mock) -> dict:
    """Method, url and keyword arguments of the last session.request call."""
    args, kwargs = session.request.call_args
    return {"method": args[0], "url": args[1], **kwargs}


@pytest.fixture
def last_request(http_session):
    return lambda: sent_request(http_session)
