"""
Application services.
"""
from .orders import OrderDetails

__all__ = ["OrderDetails"]
