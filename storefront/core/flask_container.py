# storefront/core/flask_container.py
"""
Binds a DependencyContainer to a Flask application.
"""

import logging
from typing import Type, TypeVar

from flask import Flask, current_app

from storefront.core.container import DependencyContainer

logger = logging.getLogger(__name__)

EXTENSION_KEY = "container"

T = TypeVar("T")


def init_app(app: Flask, target: DependencyContainer, request_scope: bool = True) -> None:
    """
    Attach the container to the app. With request_scope, singletons are
    memoized per request and released at request teardown.
    """
    app.extensions[EXTENSION_KEY] = target

    if request_scope:

        @app.before_request
        def _open_scope():
            target.begin_scope()

        @app.teardown_request
        def _close_scope(exc):
            target.end_scope()

    logger.debug(
        "Container attached (singleton scope: %s)",
        "request" if request_scope else "process",
    )


def get_container() -> DependencyContainer:
    """Container of the current application"""
    return current_app.extensions[EXTENSION_KEY]


def resolve(contract: Type[T]) -> T:
    """Resolve a contract from the current application's container"""
    return get_container().resolve(contract)


def build(implementation: Type[T]) -> T:
    """Instantiate a class with its dependencies from the current container"""
    return get_container().build(implementation)
