import logging
import logging.config
import pytest
from pythonjsonlogger.json import JsonFormatter
from recruitcms import create_app
from recruitcms.config import DEV_SECRET, ProductionConfig
from recruitcms.logging_config import build_logging_config
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_unknown_endpoint(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Endpoint not found"}


def test_invalid_json_body(client, tenant_admin, auth_headers):
    response = client.post("/api/pages", json=["a"], headers=auth_headers(tenant_admin))

    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid request body"}


def test_openapi_document_is_served(client):
    response = client.get("/openapi/recruiting.yaml")

    assert response.status_code == 200
    assert b"openapi:" in response.data
    response.close()


def test_cors_preflight(client):
    response = client.options(
        "/api/pages",
        headers={"Origin": "https://jobs.example.com", "Access-Control-Request-Method": "GET"},
    )

    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_cors_sends_wildcard_on_simple_requests(client):
    response = client.get("/api/health", headers={"Origin": "https://jobs.example.com"})

    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_json_logging_uses_json_formatter():
    logging.config.dictConfig(build_logging_config(json_output=True))

    handler = logging.getLogger("recruitcms").handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)

    logging.config.dictConfig(build_logging_config())


def test_production_refuses_development_secret(monkeypatch):
    monkeypatch.setattr(ProductionConfig, "SECRET_KEY", DEV_SECRET)

    with pytest.raises(RuntimeError):
        create_app("production")


def test_seed_command_is_idempotent(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed"])
    assert "Default tenant and admin users created." in result.output

    demo = Tenant.query.filter_by(subdomain="demo").one()
    assert demo.plan == "pro"
    assert User.query.filter_by(role="super_admin", tenant_id=None).count() == 1
    assert User.query.filter_by(tenant_id=demo.id, role="tenant_admin").count() == 1

    result = runner.invoke(args=["seed"])
    assert "Skipping seed" in result.output
    assert Tenant.query.count() == 1


def test_seeded_accounts_can_log_in(app, client):
    app.test_cli_runner().invoke(args=["init-db"])

    for username, password in (
        ("superadmin", app.config["SEED_SUPER_ADMIN_PASSWORD"]),
        ("admin", app.config["SEED_TENANT_ADMIN_PASSWORD"]),
    ):
        response = client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200
