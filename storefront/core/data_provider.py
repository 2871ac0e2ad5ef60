# storefront/core/data_provider.py

"""
Data Provider over the sqlite database.
Repositories depend on IDataProvider, never on sqlite3 directly.
"""

import logging
from typing import Any, Dict, List

from storefront.core.interfaces import IConfigProvider, IDataProvider
from storefront.database.database import get_db_connection

logger = logging.getLogger(__name__)


class DatabaseProvider(IDataProvider):
    """
    Database provider implementation.
    Opens a connection per call.
    """

    def __init__(self, config_provider: IConfigProvider):
        self._db_path = config_provider.get_required("DATABASE_PATH")

    def get_connection(self):
        """Get database connection"""
        return get_db_connection(self._db_path)

    def execute_query(self, query: str, params: tuple = None) -> List[Dict[str, Any]]:
        """Execute read query"""
        with self.get_connection() as conn:
            cursor = conn.execute(query, params or ())
            return [dict(row) for row in cursor.fetchall()]

    def execute(self, statement: str, params: tuple = None) -> int:
        """Execute write statement"""
        with self.get_connection() as conn:
            cursor = conn.execute(statement, params or ())
            conn.commit()
            logger.debug("Statement affected %d row(s)", cursor.rowcount)
            return cursor.rowcount

    def insert(self, statement: str, params: tuple = None) -> int:
        """Execute an INSERT and return the new row id from the same connection"""
        with self.get_connection() as conn:
            cursor = conn.execute(statement, params or ())
            conn.commit()
            return cursor.lastrowid

    def ping(self) -> bool:
        """Check the database answers a trivial query"""
        with self.get_connection() as conn:
            conn.execute("SELECT 1").fetchone()
        return True
