import pytest
from faker import Faker
from recruitcms import create_app
from recruitcms.extensions import db
from recruitcms.auth.roles import ADMIN, SUPER_ADMIN, TENANT_ADMIN, USER
from recruitcms.auth.tokens import issue_token, remember_token
from recruitcms.models.landing_page import LandingPage
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User

# Initialize Faker for generating test data
fake = Faker()

PASSWORD = "Secret123!"

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def pytest_configure(config):
    config.addinivalue_line("markers", "auth: mark test as authentication-related")
    config.addinivalue_line("markers", "tenancy: mark test as tenant-isolation-related")


@pytest.fixture()
def app(tmp_path):
    """Fresh application and in-memory database per test."""
    app = create_app("testing")
    app.config.update(UPLOAD_FOLDER=str(tmp_path / "uploads"))

    with app.app_context():
        db.create_all()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_tenant(app):
    def _make_tenant(**overrides):
        subdomain = overrides.pop("subdomain", None) or fake.unique.slug().lower()

        tenant = Tenant()
        tenant.name = overrides.pop("name", fake.company())
        tenant.subdomain = subdomain
        tenant.status = overrides.pop("status", "active")
        tenant.plan = overrides.pop("plan", "pro")
        tenant.max_users = overrides.pop("max_users", 50)
        tenant.max_pages = overrides.pop("max_pages", 100)
        tenant.settings = {"timezone": "Europe/Berlin", "language": "de"}
        tenant.branding = {"primary_color": "#3b82f6", "logo_url": "", "company_name": tenant.name}
        for field, value in overrides.items():
            setattr(tenant, field, value)

        db.session.add(tenant)
        db.session.commit()
        return tenant

    return _make_tenant


@pytest.fixture()
def make_user(app):
    def _make_user(tenant=None, role=USER, **overrides):
        user = User()
        user.tenant_id = tenant.id if tenant is not None else None
        user.username = overrides.pop("username", fake.unique.user_name())
        user.email = overrides.pop("email", fake.unique.email())
        user.role = role
        user.is_active = overrides.pop("is_active", True)
        user.set_password(overrides.pop("password", PASSWORD))

        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture()
def make_page(app):
    def _make_page(user, title="Jobs", slug=None, status="draft", content_blocks=None, tenant=None):
        page = LandingPage()
        page.tenant_id = tenant.id if tenant is not None else user.tenant_id
        page.user_id = user.id
        page.title = title
        page.slug = slug or title.lower()
        page.status = status
        page.content_blocks = content_blocks or []

        db.session.add(page)
        db.session.commit()
        return page

    return _make_page


@pytest.fixture()
def token_for(app):
    """Issue and record a token, the way login does."""
    def _token_for(user, **kwargs):
        token = issue_token(user, **kwargs)
        remember_token(token, user, tenant_id=kwargs.get("tenant_id", user.tenant_id))
        db.session.commit()
        return token

    return _token_for


@pytest.fixture()
def auth_headers(token_for):
    def _auth_headers(user, **kwargs):
        return {"Authorization": f"Bearer {token_for(user, **kwargs)}"}

    return _auth_headers


@pytest.fixture()
def tenant(make_tenant):
    return make_tenant(name="Museum GmbH", subdomain="museum")


@pytest.fixture()
def other_tenant(make_tenant):
    return make_tenant(name="Werft AG", subdomain="werft")


@pytest.fixture()
def tenant_admin(make_user, tenant):
    return make_user(tenant, TENANT_ADMIN, username="admin", email="admin@museum.test")


@pytest.fixture()
def admin(make_user, tenant):
    return make_user(tenant, ADMIN)


@pytest.fixture()
def member(make_user, tenant):
    return make_user(tenant, USER)


@pytest.fixture()
def super_admin(make_user):
    return make_user(None, SUPER_ADMIN, username="superadmin", email="superadmin@system.local")
