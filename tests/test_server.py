"""Test class CalculatorServer."""
from fastapi import FastAPI
from pydantic import ValidationError
import pytest
import uvicorn

from calculator_service.server.server import CalculatorServer


def test_server_default_config() -> None:
    """Defaults match the historical endpoint configuration."""
    server = CalculatorServer()
    assert str(server.host) == "127.0.0.1"
    assert server.port == 8081
    assert server.path == "/api/v1/calculate"
    assert server.log_level == "INFO"


def test_server_invalid_ip() -> None:
    """Ensure invalid IP addresses raise a ValidationError."""
    with pytest.raises(ValidationError):
        CalculatorServer(host="999.999.999.999")


def test_server_invalid_port() -> None:
    """Ensure ports outside valid range raise a ValidationError."""
    with pytest.raises(ValidationError):
        CalculatorServer(port=70000)


def test_server_invalid_path() -> None:
    """The endpoint path must be absolute."""
    with pytest.raises(ValidationError):
        CalculatorServer(path="calculate")


def test_server_is_immutable() -> None:
    """Network configuration cannot change after creation."""
    server = CalculatorServer()
    with pytest.raises(ValidationError):
        server.port = 9000


def test_server_start_runs_uvicorn(monkeypatch) -> None:
    """start() hands the application and bind address to uvicorn."""
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)

    server = CalculatorServer(host="0.0.0.0", port=9090, path="/calc", log_level="DEBUG")
    server.start()

    assert isinstance(calls["app"], FastAPI)
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 9090
    assert calls["log_level"] == "debug"
    assert any(getattr(route, "path", None) == "/calc" for route in calls["app"].routes)
