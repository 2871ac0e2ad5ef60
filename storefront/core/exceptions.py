# storefront/core/exceptions.py
"""Domain errors raised by repositories."""

from typing import Any


class NotFoundError(Exception):
    """Raised when an identifier does not resolve to an active record"""

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")
