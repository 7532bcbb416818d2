"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Make the flat project layout importable without installing it
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from subjects.registry import DEFAULT_REGISTRY
from upstream.gemini_client import UpstreamReply, UpstreamTransportError


class FakeGeminiClient:
    """Records requests and replays a canned UpstreamReply (or raises)."""

    def __init__(self, status_code=200, body="", error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise UpstreamTransportError(self.error)
        return UpstreamReply(status_code=self.status_code, body=self.body)


def gemini_body(text):
    return (
        '{"candidates":[{"content":{"parts":[{"text":"' + text + '"}],'
        '"role":"model"},"finishReason":"STOP","index":0}]}'
    )


@pytest.fixture
def fake_client():
    return FakeGeminiClient(body=gemini_body("A BST is..."))


@pytest.fixture
def registry():
    return DEFAULT_REGISTRY


@pytest.fixture
def client_app(fake_client, registry):
    from app import create_app

    app = create_app(registry=registry, client=fake_client)
    app.config["TESTING"] = True
    return app.test_client()
