import pytest
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User
from conftest import PASSWORD


@pytest.fixture()
def root_headers(super_admin, auth_headers):
    return auth_headers(super_admin)


def test_tenant_admin_is_not_platform_admin(client, tenant_admin, auth_headers):
    response = client.get("/api/admin/tenants", headers=auth_headers(tenant_admin))

    assert response.status_code == 403
    assert response.get_json() == {"error": "Super admin access required"}


def test_create_tenant_with_admin(client, root_headers):
    response = client.post(
        "/api/admin/tenants",
        json={
            "name": "Hafen Logistik",
            "subdomain": "hafen",
            "plan": "basic",
            "admin_email": "chef@hafen.test",
            "admin_password": PASSWORD,
        },
        headers=root_headers,
    )

    assert response.status_code == 201
    data = response.get_json()
    assert data["subdomain"] == "hafen"
    assert data["status"] == "active"
    assert data["max_users"] == 25
    assert data["max_pages"] == 50
    assert data["settings"]["timezone"] == "Europe/Berlin"
    assert data["branding"]["company_name"] == "Hafen Logistik"
    assert data["user_count"] == 1
    assert data["recent_users"][0]["role"] == "tenant_admin"

    admin = User.query.filter_by(email="chef@hafen.test").one()
    assert admin.username == "admin"
    assert admin.tenant_id == data["id"]


def test_unknown_plan_is_rejected(client, root_headers):
    response = client.post(
        "/api/admin/tenants",
        json={"name": "X", "subdomain": "x", "plan": "platinum"},
        headers=root_headers,
    )

    assert response.status_code == 400


@pytest.mark.parametrize("subdomain", ["Upper", "with space", "ümlaut", "dots.here"])
def test_invalid_subdomain(client, root_headers, subdomain):
    response = client.post(
        "/api/admin/tenants", json={"name": "X", "subdomain": subdomain}, headers=root_headers
    )

    assert response.status_code == 400


def test_duplicate_subdomain_conflicts(client, tenant, root_headers):
    response = client.post(
        "/api/admin/tenants", json={"name": "Copy", "subdomain": "museum"}, headers=root_headers
    )

    assert response.status_code == 409
    assert response.get_json() == {"error": "Subdomain already exists"}


def test_list_tenants_with_counts(client, tenant, tenant_admin, member, make_page, root_headers):
    make_page(member, status="published")

    tenants = client.get("/api/admin/tenants", headers=root_headers).get_json()

    museum = next(t for t in tenants if t["subdomain"] == "museum")
    assert museum["user_count"] == 2
    assert museum["page_count"] == 1
    assert museum["submission_count"] == 0


def test_tenant_detail(client, tenant, tenant_admin, make_page, root_headers):
    make_page(tenant_admin, title="Jobs")

    response = client.get(f"/api/admin/tenants/{tenant.id}", headers=root_headers)

    assert response.status_code == 200
    data = response.get_json()
    assert [u["username"] for u in data["recent_users"]] == ["admin"]
    assert [p["title"] for p in data["recent_pages"]] == ["Jobs"]

    assert client.get("/api/admin/tenants/missing", headers=root_headers).status_code == 404


def test_update_tenant(client, tenant, other_tenant, root_headers):
    response = client.put(
        f"/api/admin/tenants/{tenant.id}",
        json={"status": "suspended", "max_pages": 3, "branding": {"primary_color": "#000000"}},
        headers=root_headers,
    )

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "suspended"
    assert data["max_pages"] == 3
    assert data["branding"] == {"primary_color": "#000000"}

    response = client.put(
        f"/api/admin/tenants/{tenant.id}", json={"subdomain": "werft"}, headers=root_headers
    )
    assert response.status_code == 409


def test_delete_tenant_only_when_empty(client, tenant, tenant_admin, make_tenant, root_headers):
    response = client.delete(f"/api/admin/tenants/{tenant.id}", headers=root_headers)
    assert response.status_code == 400

    empty = make_tenant()
    response = client.delete(f"/api/admin/tenants/{empty.id}", headers=root_headers)
    assert response.status_code == 200
    assert Tenant.query.filter_by(id=empty.id).count() == 0


def test_platform_stats(client, tenant, tenant_admin, member, make_page, make_tenant, root_headers):
    make_tenant(plan="free", status="inactive")
    make_page(member, status="published")

    response = client.get("/api/admin/stats", headers=root_headers)

    assert response.status_code == 200
    stats = response.get_json()
    assert stats["total_tenants"] == 2
    assert stats["active_tenants"] == 1
    assert stats["total_users"] == 2
    assert stats["total_pages"] == 1
    assert stats["total_submissions"] == 0
    assert stats["plans"] == {"pro": 1, "free": 1}
    assert len(stats["recent_tenants"]) == 2
