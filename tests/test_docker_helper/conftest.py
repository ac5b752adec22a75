"""Shared fixtures for the docker_helper tests."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest

from src.docker_helper.client import DockerClient
from src.docker_helper.exceptions import DockerConnectionError
from src.docker_helper.http_client import DockerHTTPClient


class FakeHTTPClient(DockerHTTPClient):
    """Answers requests from canned responses matched by path prefix."""

    def __init__(self, responses: Optional[Dict[str, Tuple[int, str]]] = None) -> None:
        super().__init__()
        self.responses = responses or {}
        self.calls: List[Tuple[str, str, Optional[bytes]]] = []
        self.broken_paths: List[str] = []

    def perform(self, path, method="GET", headers=None, body=None):  # type: ignore[override]
        self.calls.append((method, path, body))
        for prefix in self.broken_paths:
            if path.startswith(prefix):
                raise DockerConnectionError(f"connection refused for {path}")
        # Longest prefix wins so "/containers/json" beats "/containers/"
        for prefix in sorted(self.responses, key=len, reverse=True):
            if path.startswith(prefix):
                return self.responses[prefix]
        return 204, ""

    def paths(self) -> List[str]:
        return [path for _, path, _ in self.calls]


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    return FakeHTTPClient()


@pytest.fixture
def client(fake_http: FakeHTTPClient) -> DockerClient:
    return DockerClient(http=fake_http)
