# storefront/routes/customer_routes.py

"""Customer routes served through the customer repository."""

import logging
from flask import Blueprint, jsonify, request

from storefront.core.flask_container import build
from storefront.core.interfaces import ICustomerRepository

customer_bp = Blueprint("customers", __name__)
logger = logging.getLogger(__name__)


class CustomerController:
    """Customer endpoints; the repository is supplied by the container."""

    def __init__(self, customers: ICustomerRepository):
        self.customers = customers

    def index(self):
        return self.customers.all()

    def show(self, customer_id: int):
        return self.customers.find(customer_id)

    def update(self, customer_id: int, data):
        return self.customers.update(customer_id, data)

    def destroy(self, customer_id: int) -> None:
        self.customers.delete(customer_id)


@customer_bp.route("", methods=["GET"], strict_slashes=False)
def index():
    """List active customers."""
    return jsonify(build(CustomerController).index())


@customer_bp.route("/<int:customer_id>", methods=["GET"])
def show(customer_id: int):
    """Show one active customer."""
    return jsonify(build(CustomerController).show(customer_id))


def _update_data_from_request():
    data = request.get_json(silent=True)
    if data is None:
        data = request.values.to_dict()
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    if "name" in data:
        name = data["name"]
        if not isinstance(name, str) or not name.strip():
            raise ValueError("name must be a non-empty string")
    return data


@customer_bp.route("/<int:customer_id>/update", methods=["GET", "POST", "PATCH"])
def update(customer_id: int):
    """Update the customer's name."""
    try:
        data = _update_data_from_request()
    except ValueError as e:
        logger.warning("Rejected update of customer %s: %s", customer_id, e)
        return jsonify({"error": str(e)}), 400

    customer = build(CustomerController).update(customer_id, data)
    logger.info("Customer %s updated via %s", customer_id, request.method)
    return jsonify(customer)


@customer_bp.route("/<int:customer_id>/destroy", methods=["GET", "POST", "DELETE"])
def destroy(customer_id: int):
    """Delete the customer."""
    build(CustomerController).destroy(customer_id)
    return jsonify({"status": "deleted", "customer_id": customer_id})
