from recruitcms.models.landing_page import LandingPage
from recruitcms.models.user import User
from conftest import PASSWORD


def test_member_cannot_manage_users(client, member, auth_headers):
    response = client.get("/api/users", headers=auth_headers(member))

    assert response.status_code == 403
    assert response.get_json() == {"error": "Insufficient permissions"}


def test_create_user(client, tenant_admin, auth_headers):
    response = client.post(
        "/api/users",
        json={"username": "kim", "email": "kim@museum.test", "password": PASSWORD},
        headers=auth_headers(tenant_admin),
    )

    assert response.status_code == 201
    data = response.get_json()
    assert data["role"] == "user"
    assert data["tenant_id"] == tenant_admin.tenant_id
    assert "password_hash" not in data

    # The new account can log in
    login = client.post(
        "/api/auth/login",
        json={"username": "kim", "password": PASSWORD, "subdomain": "museum"},
    )
    assert login.status_code == 200


def test_duplicate_username_or_email_conflicts(client, tenant_admin, member, auth_headers):
    headers = auth_headers(tenant_admin)

    for payload in (
        {"username": member.username, "email": "new@museum.test"},
        {"username": "fresh", "email": member.email},
    ):
        response = client.post("/api/users", json={**payload, "password": PASSWORD}, headers=headers)
        assert response.status_code == 409


def test_role_assignment_is_bounded(client, admin, tenant_admin, auth_headers):
    payload = {"username": "x", "email": "x@museum.test", "password": PASSWORD}

    response = client.post(
        "/api/users", json={**payload, "role": "super_admin"}, headers=auth_headers(tenant_admin)
    )
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid role"}

    response = client.post(
        "/api/users", json={**payload, "role": "tenant_admin"}, headers=auth_headers(admin)
    )
    assert response.status_code == 400


def test_user_limit_is_enforced(client, make_tenant, make_user, auth_headers):
    small = make_tenant(max_users=1)
    owner = make_user(small, "tenant_admin")

    response = client.post(
        "/api/users",
        json={"username": "extra", "email": "extra@x.test", "password": PASSWORD},
        headers=auth_headers(owner),
    )

    assert response.status_code == 400
    assert response.get_json() == {"error": "User limit reached for this tenant"}


def test_admin_cannot_edit_higher_role(client, admin, tenant_admin, auth_headers):
    response = client.put(
        f"/api/users/{tenant_admin.id}", json={"email": "hijack@x.test"}, headers=auth_headers(admin)
    )

    assert response.status_code == 403


def test_update_user(client, tenant_admin, member, auth_headers):
    response = client.put(
        f"/api/users/{member.id}",
        json={"role": "admin", "email": "promoted@museum.test"},
        headers=auth_headers(tenant_admin),
    )

    assert response.status_code == 200
    data = response.get_json()
    assert data["role"] == "admin"
    assert data["email"] == "promoted@museum.test"


def test_last_admin_cannot_be_deleted(client, super_admin, tenant_admin, auth_headers):
    response = client.delete(f"/api/users/{tenant_admin.id}", headers=auth_headers(super_admin))

    assert response.status_code == 400
    assert response.get_json() == {"error": "Cannot delete the last admin user"}
    assert User.query.filter_by(id=tenant_admin.id).count() == 1


def test_last_admin_cannot_be_demoted_or_deactivated(client, super_admin, tenant_admin, auth_headers):
    headers = auth_headers(super_admin)

    response = client.put(f"/api/users/{tenant_admin.id}", json={"role": "user"}, headers=headers)
    assert response.get_json() == {"error": "Cannot demote the last admin user"}

    response = client.put(f"/api/users/{tenant_admin.id}", json={"is_active": False}, headers=headers)
    assert response.get_json() == {"error": "Cannot deactivate the last admin user"}


def test_deactivated_admins_do_not_cover_the_last_active_admin(
    client, super_admin, tenant, tenant_admin, make_user, auth_headers
):
    dormant = make_user(tenant, "admin", is_active=False)
    headers = auth_headers(super_admin)

    response = client.put(f"/api/users/{tenant_admin.id}", json={"is_active": False}, headers=headers)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Cannot deactivate the last admin user"}

    response = client.delete(f"/api/users/{tenant_admin.id}", headers=headers)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Cannot delete the last admin user"}

    response = client.delete(f"/api/users/{dormant.id}", headers=headers)
    assert response.status_code == 200


def test_delete_user_takes_their_pages(client, tenant_admin, admin, make_page, auth_headers):
    make_page(admin, title="Admin page")

    response = client.delete(f"/api/users/{admin.id}", headers=auth_headers(tenant_admin))

    assert response.status_code == 200
    assert LandingPage.query.count() == 0


def test_super_admin_creates_user_in_named_tenant(client, super_admin, tenant, auth_headers):
    headers = auth_headers(super_admin)
    payload = {"username": "ops", "email": "ops@museum.test", "password": PASSWORD}

    assert client.post("/api/users", json=payload, headers=headers).status_code == 400

    response = client.post("/api/users", json={**payload, "tenant_id": tenant.id}, headers=headers)
    assert response.status_code == 201
    assert response.get_json()["tenant_id"] == tenant.id
