"""
Tests for host based routing over HTTP
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
import structlog
from structlog.testing import capture_logs

import gateway.main as gateway_main
from gateway.main import create_app
from gateway.routes import hosts
from gateway.routes.hosts import NOT_FOUND_BODY
from gateway.utils.config import GatewaySettings


class TestHostRouting:
    """Test the GET / routing endpoint"""

    @pytest.mark.parametrize("host, expected", [
        ("mango.com", {"host": "mango.com", "route": "site-mango"}),
        ("apple.com", {"host": "apple.com", "route": "site-apple"}),
        ("APPLE.COM:443", {"host": "apple.com", "route": "site-apple"}),
        ("Mango.com:8080", {"host": "mango.com", "route": "site-mango"}),
    ])
    def test_routed_host(self, client, host, expected):
        response = client.get("/", headers={"host": host})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == expected

    @pytest.mark.parametrize("host", ["notmango.com", "mango.com.evil", "[::1]:8080"])
    def test_unrouted_host(self, client, host):
        response = client.get("/", headers={"host": host})
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == NOT_FOUND_BODY

    def test_default_test_host_is_not_routed(self, client):
        response = client.get("/")
        assert response.status_code == 404

    def test_other_methods_not_allowed(self, client):
        response = client.post("/", headers={"host": "mango.com"})
        assert response.status_code == 405

    def test_other_paths_not_found(self, client):
        response = client.get("/anything", headers={"host": "mango.com"})
        assert response.status_code == 404

    def test_custom_routes(self):
        settings = GatewaySettings(routes={"Pear.org:80": "site-pear", "[::1]": "site-local"})
        client = TestClient(create_app(settings))

        response = client.get("/", headers={"host": "pear.org"})
        assert response.status_code == 200
        assert response.json() == {"host": "pear.org", "route": "site-pear"}

        response = client.get("/", headers={"host": "[::1]:8080"})
        assert response.status_code == 200
        assert response.json() == {"host": "::1", "route": "site-local"}

        response = client.get("/", headers={"host": "mango.com"})
        assert response.status_code == 404

    def test_route_table_is_built_once(self, gateway_settings):
        app = create_app(gateway_settings)
        table = app.state.route_table
        client = TestClient(app)

        client.get("/", headers={"host": "mango.com"})
        client.get("/", headers={"host": "notmango.com"})

        assert app.state.route_table is table
        assert table.as_dict() == {"mango.com": "site-mango", "apple.com": "site-apple"}


class TestRoutingLogs:
    """Test log output of the routing endpoint"""

    @pytest.fixture
    def captured(self, monkeypatch):
        with capture_logs() as entries:
            # module loggers keep the processors they were first used with
            monkeypatch.setattr(hosts, "logger", structlog.get_logger(hosts.__name__))
            monkeypatch.setattr(gateway_main, "logger", structlog.get_logger(gateway_main.__name__))
            yield entries

    def test_unrouted_host_logged_at_info(self, client, captured):
        response = client.get("/", headers={"host": "notmango.com"})
        assert response.status_code == 404

        not_routed = [e for e in captured if e["event"] == "Host not routed"]
        assert len(not_routed) == 1
        assert not_routed[0]["log_level"] == "info"
        assert not_routed[0]["raw_host"] == "notmango.com"
        assert not [e for e in captured if e["log_level"] in ("warning", "error", "critical")]

    def test_routed_host_logged_at_debug(self, client, captured):
        response = client.get("/", headers={"host": "mango.com"})
        assert response.status_code == 200

        routed = [e for e in captured if e["event"] == "Host routed"]
        assert len(routed) == 1
        assert routed[0]["log_level"] == "debug"
        assert routed[0]["route"] == "site-mango"
        assert not [e for e in captured if e["event"] == "Host not routed"]

    def test_requests_logged(self, client, captured):
        client.get("/health")

        events = [e["event"] for e in captured]
        assert "Request received" in events
        assert "Request completed" in events


class TestErrorHandling:
    """Test the global exception handler"""

    def test_unhandled_exception_returns_500(self, gateway_settings):
        app = create_app(gateway_settings)
        broken = MagicMock()
        broken.resolve.side_effect = RuntimeError("table exploded")
        app.state.route_table = broken

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/", headers={"host": "mango.com"})

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }


def test_lifespan_runs(gateway_settings):
    """Startup and shutdown complete with the route table in place"""
    with TestClient(create_app(gateway_settings)) as client:
        response = client.get("/", headers={"host": "apple.com"})
        assert response.status_code == 200


def test_openapi_spec(client):
    """Test that OpenAPI spec is accessible"""
    response = client.get("/openapi.json")
    assert response.status_code == 200

    spec = response.json()
    assert spec["info"]["title"] == "Virtual Host Gateway"
    assert "/health" in spec["paths"]
    assert "/" in spec["paths"]
