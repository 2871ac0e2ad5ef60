"""
API routes for users and service health.
"""

# storefront/routes/api_routes.py

from flask import Blueprint, current_app, jsonify

from storefront.core.flask_container import get_container, resolve
from storefront.core.health_checker import HealthChecker
from storefront.core.interfaces import IConfigProvider, IUserRepository

api_bp = Blueprint("api", __name__)

USERS_PAGE_SIZE = 5


@api_bp.route("/users", methods=["GET"], strict_slashes=False)
def users():
    """Return the first users."""
    return jsonify(resolve(IUserRepository).take(USERS_PAGE_SIZE))


@api_bp.route("/api/health", methods=["GET"], strict_slashes=False)
def health_check():
    """Service health report"""
    config = resolve(IConfigProvider)
    checker = HealthChecker(current_app, config, get_container())
    report = checker.check_health()
    report["environment"] = config.get("ENV")
    return jsonify(report), 200 if report["healthy"] else 503
