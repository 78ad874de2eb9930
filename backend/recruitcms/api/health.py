import logging
from flask import jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from recruitcms.extensions import db
from . import api_bp

logger = logging.getLogger(__name__)


@api_bp.route("/health", methods=["GET"])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        db.session.rollback()
        database = "unavailable"

    status_code = 200 if database == "ok" else 503
    return jsonify({
        "status": "ok" if status_code == 200 else "degraded",
        "service": "recruitcms",
        "database": database,
    }), status_code
