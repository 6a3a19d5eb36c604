"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.errors import SendError  # noqa: E402
from core.models import HttpRequest, HttpResponse  # noqa: E402


SAMPLE_CONFIG = """{
  // Body types that get their comments stripped
  "body_types": ["application/json"],
  "action": {
    "label": "Send (Strip Comments)", /* menu entry */
    "icon": "check_circle"
  },
  "variables": {
    "base_url": "https://api.example.com", // no trailing slash
    "auth": {"token": "abc123"}
  },
  "send": {"timeout": 5}
}
"""


@pytest.fixture
def clear_config_cache():
    """Clear config cache before and after test."""
    from lib.config import clear_cache

    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def tmp_project(tmp_path, monkeypatch, clear_config_cache):
    """Create a temporary project with a JSONC config and chdir into it."""
    config_dir = tmp_path / ".strip-comments"
    config_dir.mkdir()
    (config_dir / "config.jsonc").write_text(SAMPLE_CONFIG)
    monkeypatch.delenv("PROJECT_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def json_request():
    """Return a request with a commented JSON body."""
    return HttpRequest(
        url="{{base_url}}/users",
        method="POST",
        headers={"Authorization": "Bearer {{auth.token}}"},
        body_type="application/json",
        body_text='{\n  // who\n  "name": "{{name}}" /* required */\n}',
    )


class FakeRenderer:
    """RenderPort stub that substitutes nothing."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    def render(self, request, purpose):
        self.calls.append((request, purpose))
        if self.error is not None:
            raise self.error
        return request


class FakeSender:
    """SendPort stub recording sent requests."""

    def __init__(self, status: int = 200, reason: str | None = "OK", error: Exception | None = None):
        self.status = status
        self.reason = reason
        self.error = error
        self.sent = []

    def send(self, request):
        self.sent.append(request)
        if self.error is not None:
            raise self.error
        return HttpResponse(status=self.status, status_reason=self.reason)


class FakeNotifier:
    """NotifyPort stub recording toasts."""

    def __init__(self):
        self.toasts = []

    def show(self, toast):
        self.toasts.append(toast)


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def fake_sender():
    return FakeSender()


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
def failing_sender():
    return FakeSender(error=SendError("connection refused"))


@pytest.fixture
def make_renderer():
    """Return the FakeRenderer class for custom setups."""
    return FakeRenderer


@pytest.fixture
def make_sender():
    """Return the FakeSender class for custom setups."""
    return FakeSender
