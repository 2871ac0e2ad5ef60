# storefront/repositories/customer_repository.py
"""
Customer repository backed by IDataProvider.
Controllers depend on ICustomerRepository and never build SQL themselves.
"""

import logging
from typing import Any, Dict, List, Optional

from storefront.core.exceptions import NotFoundError
from storefront.core.interfaces import ICustomerRepository, IDataProvider
from storefront.utils.decorators import debug
from storefront.utils.time_utils import diff_for_humans, utcnow_timestamp

logger = logging.getLogger(__name__)

_SELECT_WITH_USER = """
    SELECT c.id, c.name, c.active, c.user_id, c.created_at, c.updated_at,
           u.email AS user_email
    FROM customers c
    LEFT JOIN users u ON u.id = c.user_id
"""

UPDATABLE_FIELDS = ("name",)


class CustomerRepository(ICustomerRepository):
    """sqlite implementation of ICustomerRepository"""

    def __init__(self, data_provider: IDataProvider):
        self._db = data_provider

    @debug
    def all(self) -> List[Dict[str, Any]]:
        rows = self._db.execute_query(
            _SELECT_WITH_USER + " WHERE c.active = 1 ORDER BY c.active, c.id"
        )
        return [self.format(row) for row in rows]

    @debug
    def find(self, customer_id: int) -> Dict[str, Any]:
        rows = self._db.execute_query(
            _SELECT_WITH_USER + " WHERE c.active = 1 AND c.id = ? LIMIT 1",
            (customer_id,),
        )
        if not rows:
            raise NotFoundError("Customer", customer_id)
        return self.format(rows[0])

    @debug
    def find_by_name(self, customer_name: str) -> Optional[Dict[str, Any]]:
        rows = self._db.execute_query(
            "SELECT * FROM customers WHERE name = ? ORDER BY id LIMIT 1",
            (customer_name,),
        )
        return rows[0] if rows else None

    @debug
    def update(self, customer_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        self._first_or_fail(customer_id)

        changes = {key: data[key] for key in UPDATABLE_FIELDS if key in data}
        if changes:
            assignments = ", ".join(f"{key} = ?" for key in changes)
            self._db.execute(
                f"UPDATE customers SET {assignments}, updated_at = ? WHERE id = ?",
                (*changes.values(), utcnow_timestamp(), customer_id),
            )
            logger.info("Customer %s updated: %s", customer_id, ", ".join(changes))

        return self._first_or_fail(customer_id)

    @debug
    def delete(self, customer_id: int) -> None:
        self._first_or_fail(customer_id)
        self._db.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
        logger.info("Customer %s deleted", customer_id)

    def create(self, name: str, user_id: Optional[int] = None, active: bool = True) -> int:
        """Insert a customer and return its id"""
        return self._db.insert(
            "INSERT INTO customers (name, user_id, active) VALUES (?, ?, ?)",
            (name, user_id, 1 if active else 0),
        )

    def _first_or_fail(self, customer_id: int) -> Dict[str, Any]:
        rows = self._db.execute_query(
            "SELECT * FROM customers WHERE id = ? AND active = 1 LIMIT 1",
            (customer_id,),
        )
        if not rows:
            raise NotFoundError("Customer", customer_id)
        return rows[0]

    @staticmethod
    def format(row: Dict[str, Any]) -> Dict[str, Any]:
        """Shape a joined customer row for API output"""
        return {
            "customer_id": row["id"],
            "name": row["name"],
            "created_by": row.get("user_email"),
            "last_updated": diff_for_humans(row.get("updated_at")),
        }
