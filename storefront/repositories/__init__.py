"""
Repositories package.
"""
from .customer_repository import CustomerRepository
from .user_repository import UserRepository

__all__ = [
    "CustomerRepository",
    "UserRepository",
]
