import pytest

from storefront import create_app
from storefront.config import Config
from storefront.core.container import DependencyContainer
from storefront.core.data_provider import DatabaseProvider
from storefront.database.database import init_db
from storefront.repositories import CustomerRepository, UserRepository


def _overrides(tmp_path, **extra):
    values = {
        "ENV": "testing",
        "SECRET_KEY": "test-secret",
        "DATABASE_PATH": str(tmp_path / "storefront.db"),
        "LOG_DIR": str(tmp_path / "logs"),
        "PAYMENT_CURRENCY": "USD",
        "SINGLETON_SCOPE": "request",
    }
    values.update(extra)
    return values


@pytest.fixture
def make_app(tmp_path):
    """Build an app on a fresh container and a temporary database."""

    def _make(**extra):
        target = DependencyContainer()
        app = create_app(_overrides(tmp_path, **extra), target=target)
        app.config["TESTING"] = True
        return app, target

    return _make


@pytest.fixture
def app(make_app):
    app, _ = make_app()
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_config(tmp_path):
    config = Config({"DATABASE_PATH": str(tmp_path / "repo.db")})
    init_db(config.DATABASE_PATH)
    return config


@pytest.fixture
def data_provider(db_config):
    return DatabaseProvider(db_config)


@pytest.fixture
def customers(data_provider):
    return CustomerRepository(data_provider)


@pytest.fixture
def users(data_provider):
    return UserRepository(data_provider)
