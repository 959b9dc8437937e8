"""
Pytest fixtures for gateway and echo service tests
"""

import pytest
from fastapi.testclient import TestClient
from typing import Dict

from gateway.main import create_app
from gateway.utils.config import GatewaySettings
from gateway.utils.route_table import RouteTable
from echo_app.config import EchoSettings
from echo_app.main import create_app as create_echo_app


@pytest.fixture
def routes() -> Dict[str, str]:
    """Route table used across the routing tests"""
    return {
        "mango.com": "site-mango",
        "apple.com": "site-apple",
    }


@pytest.fixture
def route_table(routes) -> RouteTable:
    return RouteTable(routes)


@pytest.fixture
def gateway_settings(routes) -> GatewaySettings:
    return GatewaySettings(routes=routes)


@pytest.fixture
def client(gateway_settings) -> TestClient:
    """Test client for a gateway built from the fixture routes"""
    return TestClient(create_app(gateway_settings))


@pytest.fixture
def echo_client_factory():
    """Build a test client for an echo backend with the given name"""
    def _factory(name: str) -> TestClient:
        return TestClient(create_echo_app(EchoSettings(name=name)))
    return _factory
