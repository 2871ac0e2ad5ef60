# storefront/config.py
"""
Configuration provider.
Separated from logging configuration for Single Responsibility.
"""

import os
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

SINGLETON_SCOPES = ("request", "process")


class Config:
    """
    Configuration provider following Single Responsibility Principle.
    Only handles configuration loading and validation.
    """

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        # Environment
        self.ENV: str = os.getenv("FLASK_ENV", "production").lower()

        # Directories
        self.PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.DATABASE_PATH: str = os.getenv(
            "DATABASE_PATH", os.path.join(self.PROJECT_ROOT, "instance", "storefront.db")
        )
        self.LOG_DIR: str = os.getenv("LOG_DIR", os.path.join(self.PROJECT_ROOT, "logs"))

        # Core settings
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.PORT: int = int(os.getenv("PORT", "8000"))

        # Payment
        self.PAYMENT_CURRENCY: str = os.getenv("PAYMENT_CURRENCY", "USD")

        # Container
        self.SINGLETON_SCOPE: str = os.getenv("SINGLETON_SCOPE", "request").lower()

        for key, value in (overrides or {}).items():
            setattr(self, key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return getattr(self, key, default)

    def get_required(self, key: str) -> Any:
        """Get required configuration value"""
        value = self.get(key)
        if value is None:
            raise EnvironmentError(f"Required configuration '{key}' not found")
        return value

    def has(self, key: str) -> bool:
        """Check if configuration key exists"""
        return hasattr(self, key) and getattr(self, key) is not None

    def validate(self) -> None:
        """Validate required configuration values"""
        missing = [field for field in self.get_required_fields() if not getattr(self, field)]

        if missing:
            raise EnvironmentError(
                f"Required configuration missing: {', '.join(missing)}"
            )

        if self.SINGLETON_SCOPE not in SINGLETON_SCOPES:
            raise EnvironmentError(
                f"SINGLETON_SCOPE must be one of {', '.join(SINGLETON_SCOPES)}, "
                f"got '{self.SINGLETON_SCOPE}'"
            )

    def get_required_fields(self) -> List[str]:
        """Get list of required configuration fields"""
        return ["SECRET_KEY", "DATABASE_PATH", "PAYMENT_CURRENCY"]

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENV == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENV == "production"

    def uses_request_scope(self) -> bool:
        """Check if singletons are memoized per request"""
        return self.SINGLETON_SCOPE == "request"
