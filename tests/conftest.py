"""Shared fixtures: a recording provider that replays canned bodies."""

import json
from typing import Any, Union

import pytest

from geolocate.exceptions import TransportError
from geolocate.fetching.transport import ProviderRequest


class FakeProvider:
    def __init__(self, *bodies: Union[bytes, dict[str, Any], Exception]):
        self.bodies = list(bodies)
        self.requests: list[ProviderRequest] = []

    def send(self, request: ProviderRequest) -> bytes:
        self.requests.append(request)
        body = self.bodies.pop(0)
        if isinstance(body, Exception):
            raise body
        if isinstance(body, dict):
            return json.dumps(body).encode()
        return body


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("Received status code 500", status_code=500, body=b"")
