from flask import Blueprint

# Every JSON endpoint lives under /api
api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import pages
from . import users
from . import uploads
from . import submissions
from . import tenants
