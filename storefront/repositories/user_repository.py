# storefront/repositories/user_repository.py

from typing import Any, Dict, List, Optional

from storefront.core.interfaces import IDataProvider, IUserRepository


class UserRepository(IUserRepository):
    """sqlite implementation of IUserRepository"""

    def __init__(self, data_provider: IDataProvider):
        self._db = data_provider

    def take(self, limit: int = 5) -> List[Dict[str, Any]]:
        return self._db.execute_query(
            "SELECT id, name, email, created_at FROM users ORDER BY id LIMIT ?",
            (limit,),
        )

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        rows = self._db.execute_query(
            "SELECT id, name, email, created_at FROM users WHERE email = ?", (email,)
        )
        return rows[0] if rows else None

    def create(self, name: str, email: str) -> int:
        """Insert a user and return its id"""
        return self._db.insert(
            "INSERT INTO users (name, email) VALUES (?, ?)", (name, email)
        )
