# storefront/core/interfaces.py
"""
Interfaces following Interface Segregation Principle (ISP).
Each interface has a single, focused responsibility.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol
import logging


# Core service interfaces
class IConfigProvider(Protocol):
    """Interface for configuration providers"""

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        ...

    def get_required(self, key: str) -> Any:
        """Get required configuration value"""
        ...


class ILogger(Protocol):
    """Interface for logging services"""

    def get_logger(self, name: str) -> logging.Logger:
        """Get logger by name"""
        ...

    def info(self, message: str) -> None:
        ...

    def critical(self, message: str) -> None:
        ...


class IHealthChecker(Protocol):
    """Interface for health checking"""

    def check_health(self) -> Dict[str, Any]:
        """Check if service is healthy"""
        ...


# Data access
class IDataProvider(ABC):
    """Interface for data providers"""

    @abstractmethod
    def execute_query(self, query: str, params: tuple = None) -> List[Dict[str, Any]]:
        """Run a read query and return the rows as dicts"""
        ...

    @abstractmethod
    def execute(self, statement: str, params: tuple = None) -> int:
        """Run a write statement and return the affected row count"""
        ...

    @abstractmethod
    def insert(self, statement: str, params: tuple = None) -> int:
        """Run an INSERT and return the id of the new row"""
        ...


# Repositories
class ICustomerRepository(ABC):
    """Contract for customer data access used by controllers"""

    @abstractmethod
    def all(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def find(self, customer_id: int) -> Dict[str, Any]:
        pass

    @abstractmethod
    def find_by_name(self, customer_name: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def update(self, customer_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    def delete(self, customer_id: int) -> None:
        pass


class IUserRepository(ABC):
    """Contract for user data access"""

    @abstractmethod
    def take(self, limit: int = 5) -> List[Dict[str, Any]]:
        """Return the first users"""
        pass


# Payment
class IPaymentGateway(ABC):
    """Contract for anything that can charge an amount"""

    @abstractmethod
    def charge(self, amount: float) -> Dict[str, Any]:
        """Charge the amount, applying the current discount"""
        pass

    @abstractmethod
    def set_discount(self, discount: float) -> None:
        """Set the discount applied by the next charge"""
        pass
