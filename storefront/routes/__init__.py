"""
Application routes package.
"""
from .api_routes import api_bp
from .customer_routes import customer_bp
from .payment_routes import payment_bp

__all__ = [
    "api_bp",
    "customer_bp",
    "payment_bp",
]
