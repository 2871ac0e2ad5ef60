# storefront/__init__.py
"""
Flask application factory wiring the repository and payment services
through the dependency injection container.
"""

from typing import Any, Dict, Optional

from flask import Flask, jsonify

from .cli.db_commands import db_cli
from .config import Config
from .core import flask_container
from .core.container import (
    BindingNotFoundError,
    DependencyContainer,
    DependencyInjectionError,
    container,
)
from .core.exceptions import NotFoundError
from .core.interfaces import IConfigProvider, ILogger
from .core.logging_service import FlaskLogger
from .core.service_factory import register_services
from .database.database import init_db
from .routes import api_bp, customer_bp, payment_bp


class FlaskAppFactory:
    """
    Flask application factory.
    Only creates Flask apps; every dependency arrives through the constructor.
    """

    def __init__(self, config: Config, app_logger: FlaskLogger, target: DependencyContainer):
        self.config = config
        self.logger = app_logger
        self.container = target

    def create_app(self) -> Flask:
        """Create and configure Flask application"""
        app = Flask(__name__)

        self._configure_flask(app)
        self.logger.configure(app)
        self._validate_configuration()

        flask_container.init_app(
            app, self.container, request_scope=self.config.uses_request_scope()
        )

        self._register_blueprints(app)
        self._register_error_handlers(app)
        self._register_cli_commands(app)
        self._initialize_database()

        return app

    def _configure_flask(self, app: Flask) -> None:
        """Configure Flask application settings"""
        app.config.update(
            SECRET_KEY=self.config.get("SECRET_KEY"),
            ENV=self.config.get("ENV"),
            DEBUG=self.config.is_development(),
        )
        app.json.sort_keys = False

    def _register_blueprints(self, app: Flask) -> None:
        """Register all application blueprints"""
        blueprints = [
            (customer_bp, "/customers"),
            (payment_bp, None),
            (api_bp, None),
        ]

        for blueprint, url_prefix in blueprints:
            app.register_blueprint(blueprint, url_prefix=url_prefix)

    def _register_error_handlers(self, app: Flask) -> None:
        """Translate domain errors into JSON responses"""

        @app.errorhandler(NotFoundError)
        def _not_found(error: NotFoundError):
            return jsonify({"error": str(error)}), 404

        @app.errorhandler(BindingNotFoundError)
        def _binding_not_found(error: BindingNotFoundError):
            app.logger.error("Unbound contract requested: %s", error)
            return jsonify({"error": str(error)}), 500

        @app.errorhandler(DependencyInjectionError)
        def _injection_failed(error: DependencyInjectionError):
            app.logger.error("Dependency resolution failed: %s", error)
            return jsonify({"error": str(error)}), 500

    def _register_cli_commands(self, app: Flask) -> None:
        """Register CLI commands"""
        app.cli.add_command(db_cli)

    def _validate_configuration(self) -> None:
        """Validate configuration after app creation"""
        try:
            self.config.validate()
            self.logger.info("Configuration validation successful")
        except EnvironmentError as e:
            self.logger.critical(f"Configuration validation failed: {e}")
            raise

    def _initialize_database(self) -> None:
        """Create the schema if it does not exist yet"""
        db_path = self.config.get_required("DATABASE_PATH")
        init_db(db_path)
        self.logger.info(f"Database ready at {db_path}")


def create_app(
    config_overrides: Optional[Dict[str, Any]] = None,
    target: Optional[DependencyContainer] = None,
) -> Flask:
    """
    Main application factory function.
    Registers the service bindings, then builds the app from them.
    """
    target = target if target is not None else container

    config = Config(config_overrides)
    app_logger = FlaskLogger(config)
    register_services(target, config, app_logger)

    factory = FlaskAppFactory(
        target.resolve(IConfigProvider), target.resolve(ILogger), target
    )
    return factory.create_app()
