"""
Core module for dependency injection and application wiring.
"""

from .container import (
    BindingNotFoundError,
    DependencyContainer,
    DependencyInjectionError,
    Lifetime,
    container,
)
from .exceptions import NotFoundError

__all__ = [
    "BindingNotFoundError",
    "DependencyContainer",
    "DependencyInjectionError",
    "Lifetime",
    "NotFoundError",
    "container",
]
