import logging
import click
from flask import current_app
from recruitcms.extensions import db
from recruitcms.auth.roles import SUPER_ADMIN, TENANT_ADMIN
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User

logger = logging.getLogger(__name__)


def seed_defaults():
    """
    Create the demo tenant, the platform super admin and the demo tenant's
    admin. Does nothing once any tenant exists. Returns True when data was
    created.
    """
    if Tenant.query.count() > 0:
        return False

    tenant = Tenant()
    tenant.name = "WWS-Strube Demo"
    tenant.subdomain = current_app.config["DEFAULT_TENANT_SUBDOMAIN"]
    tenant.status = "active"
    tenant.plan = "pro"
    tenant.max_users = 50
    tenant.max_pages = 100
    tenant.settings = {"timezone": "Europe/Berlin", "language": "de"}
    tenant.branding = {
        "primary_color": "#3b82f6",
        "logo_url": "",
        "company_name": "WWS-Strube",
    }
    db.session.add(tenant)
    db.session.flush()

    super_admin = User()
    super_admin.tenant_id = None
    super_admin.username = "superadmin"
    super_admin.email = "superadmin@system.local"
    super_admin.role = SUPER_ADMIN
    super_admin.set_password(current_app.config["SEED_SUPER_ADMIN_PASSWORD"])
    db.session.add(super_admin)

    admin = User()
    admin.tenant_id = tenant.id
    admin.username = "admin"
    admin.email = "admin@wws-strube.de"
    admin.role = TENANT_ADMIN
    admin.set_password(current_app.config["SEED_TENANT_ADMIN_PASSWORD"])
    db.session.add(admin)

    db.session.commit()
    logger.info("Seeded demo tenant %s with super admin and tenant admin", tenant.subdomain)
    return True


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables and seed the default data."""
        db.create_all()
        click.echo("Database tables created.")

        if seed_defaults():
            click.echo("Default tenant and admin users created.")
        else:
            click.echo("Tenants already exist. Skipping seed.")

    @app.cli.command("seed")
    def seed():
        """Seed the default tenant and admin users."""
        if seed_defaults():
            click.echo("Default tenant and admin users created.")
        else:
            click.echo("Tenants already exist. Skipping seed.")
