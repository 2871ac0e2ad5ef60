# storefront/core/health_checker.py

"""
Health checker implementation.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Tuple, Type

from storefront.core.container import DependencyContainer
from storefront.core.interfaces import (
    ICustomerRepository,
    IConfigProvider,
    IDataProvider,
    IHealthChecker,
    IPaymentGateway,
)

logger = logging.getLogger(__name__)

REQUIRED_CONTRACTS: Tuple[Type, ...] = (
    IDataProvider,
    ICustomerRepository,
    IPaymentGateway,
)


class HealthChecker(IHealthChecker):
    """
    Health checker implementation following Single Responsibility Principle.
    Only responsible for checking system health.
    """

    def __init__(self, flask_app, config: IConfigProvider, target: DependencyContainer):
        self.flask_app = flask_app
        self.config = config
        self.container = target
        self.last_check_time = None
        self.last_check_results = {}

    def check_health(self) -> Dict[str, Any]:
        """Check overall system health"""
        health_results = {
            "healthy": True,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {},
        }

        checks: List[Tuple[str, Callable[[], Dict[str, Any]]]] = [
            ("database", self._check_database_health),
            ("configuration", self._check_configuration_health),
            ("container", self._check_container_health),
            ("flask_app", self._check_flask_app_health),
        ]

        for check_name, check_function in checks:
            try:
                result = check_function()
            except Exception as e:
                logger.error(f"Health check '{check_name}' failed: {e}")
                result = {"healthy": False, "error": str(e)}

            health_results["checks"][check_name] = result
            if not result.get("healthy", False):
                health_results["healthy"] = False

        self.last_check_time = datetime.now(timezone.utc)
        self.last_check_results = health_results

        return health_results

    def is_healthy(self) -> bool:
        """Check if system is currently healthy"""
        return self.check_health().get("healthy", False)

    def _check_database_health(self) -> Dict[str, Any]:
        """Check database health"""
        provider = self.container.resolve(IDataProvider)
        provider.execute_query("SELECT 1")
        return {"healthy": True, "status": "connected"}

    def _check_configuration_health(self) -> Dict[str, Any]:
        """Check configuration health"""
        try:
            self.config.validate()
        except EnvironmentError as e:
            return {"healthy": False, "status": "invalid", "error": str(e)}
        return {"healthy": True, "status": "valid"}

    def _check_container_health(self) -> Dict[str, Any]:
        """Check every contract the routes depend on is bound"""
        missing = [
            contract.__name__
            for contract in REQUIRED_CONTRACTS
            if not self.container.has_registration(contract)
        ]
        return {"healthy": not missing, "missing": missing}

    def _check_flask_app_health(self) -> Dict[str, Any]:
        """Check Flask app health"""
        if not self.flask_app:
            return {"healthy": False, "error": "Flask app not initialized"}

        return {
            "healthy": True,
            "status": "running",
            "blueprints_count": len(self.flask_app.blueprints),
        }
