# storefront/routes/payment_routes.py

"""Checkout route: charges the order through the bound payment gateway."""

import logging
import math
from flask import Blueprint, jsonify, request

from storefront.core.flask_container import resolve
from storefront.core.interfaces import IPaymentGateway
from storefront.services import OrderDetails

payment_bp = Blueprint("payments", __name__)
logger = logging.getLogger(__name__)


def _amount_from_request():
    raw = request.values.get("amount")
    if raw is None and request.is_json:
        body = request.get_json(silent=True)
        raw = body.get("amount") if isinstance(body, dict) else None
    if raw is None:
        raise ValueError("amount is required")
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"amount must be a number, got {raw!r}")
    if not math.isfinite(amount):
        raise ValueError(f"amount must be a finite number, got {raw!r}")
    return amount


@payment_bp.route("/pay", methods=["GET", "POST"])
def store():
    """Build the order, then charge its amount."""
    try:
        amount = _amount_from_request()
    except ValueError as e:
        logger.warning("Rejected payment request: %s", e)
        return jsonify({"error": str(e)}), 400

    order_details = resolve(OrderDetails)
    payment_gateway = resolve(IPaymentGateway)

    order = order_details.all()
    result = payment_gateway.charge(amount)

    logger.info(
        "Charged %s %s for %s via %s",
        result["amount"],
        result["currency"],
        order["name"],
        payment_gateway.__class__.__name__,
    )
    return jsonify(result)
