"""Tests for jalanma/core/exception_handlers.py."""

from fastapi.testclient import TestClient
from sqlmodel import Session

from jalanma.core.exceptions import AppException
from jalanma.main import app
from jalanma.report import service as report_service


def test_unknown_route_uses_error_body(client: TestClient):
    response = client.get("/rpc/doesNotExist")

    assert response.status_code == 404
    assert response.json()["type"] == "http_error"


def test_storage_failure_becomes_500(client: TestClient, monkeypatch):
    def broken(_session: Session, _report_id: str):
        raise RuntimeError("disk I/O error")

    monkeypatch.setattr(report_service, "get_report_by_id", broken)

    with TestClient(app, raise_server_exceptions=False) as failing_client:
        response = failing_client.get("/rpc/getRoadDamageReportById", params={"id": "x"})

    assert response.status_code == 500
    assert response.json() == {
        "type": "internal_error",
        "message": "An unexpected error occurred",
    }


def test_app_exception_defaults():
    error = AppException()

    assert error.status_code == 500
    assert error.error_type == "internal_error"
    assert error.message == "An unexpected error occurred"
