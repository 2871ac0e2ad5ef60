# storefront/core/service_factory.py
"""
Service Factory.
Implements Factory Pattern and binds every contract in the container.
"""

import logging
from typing import Callable, Optional

from flask import has_request_context, request

from storefront.core.container import DependencyContainer, Lifetime
from storefront.core.data_provider import DatabaseProvider
from storefront.core.interfaces import (
    ICustomerRepository,
    IConfigProvider,
    IDataProvider,
    ILogger,
    IPaymentGateway,
    IUserRepository,
)
from storefront.repositories import CustomerRepository, UserRepository
from storefront.services import OrderDetails
from storefront.services.payment import BankPaymentGateway, CreditPaymentGateway

logger = logging.getLogger(__name__)

PAYMENT_METHOD_PARAM = "paymentMethod"


def request_payment_method() -> Optional[str]:
    """Payment method selector of the current request, if any"""
    if not has_request_context():
        return None

    method = request.values.get(PAYMENT_METHOD_PARAM)
    if method is None and request.is_json:
        body = request.get_json(silent=True)
        if isinstance(body, dict):
            method = body.get(PAYMENT_METHOD_PARAM)
    return method


class AbstractServiceFactory:
    """
    Abstract service factory.
    Depends on abstractions, not concretions.
    """

    def __init__(self, config_provider: IConfigProvider):
        self._config = config_provider

    def get_config(self) -> IConfigProvider:
        """Get configuration provider"""
        return self._config


class PaymentServiceFactory(AbstractServiceFactory):
    """
    Factory for payment gateways.
    Picks the concrete gateway from a payment method selector.
    """

    def __init__(
        self,
        config_provider: IConfigProvider,
        selector: Callable[[], Optional[str]] = request_payment_method,
    ):
        super().__init__(config_provider)
        self._selector = selector

    def create_payment_gateway(self) -> IPaymentGateway:
        """Create the gateway for the selected payment method"""
        currency = self._config.get("PAYMENT_CURRENCY", "USD")
        method = self._selector()

        if method == "credit":
            gateway = CreditPaymentGateway(currency)
        else:
            gateway = BankPaymentGateway(currency)

        logger.debug(
            "Payment method %r -> %s (%s)", method, gateway.__class__.__name__, currency
        )
        return gateway


def register_services(
    target: DependencyContainer,
    config: IConfigProvider,
    app_logger: Optional[ILogger] = None,
    payment_selector: Callable[[], Optional[str]] = request_payment_method,
) -> None:
    """Bind every application contract in the container"""
    try:
        target.register_instance(IConfigProvider, config)
        if app_logger is not None:
            target.register_instance(ILogger, app_logger)

        # Data access
        target.register_type(IDataProvider, DatabaseProvider, Lifetime.SINGLETON)
        target.register_type(ICustomerRepository, CustomerRepository)
        target.register_type(IUserRepository, UserRepository)

        # Payment
        payment_factory = PaymentServiceFactory(config, payment_selector)
        target.register_singleton(
            IPaymentGateway, lambda: payment_factory.create_payment_gateway()
        )
        target.register_type(OrderDetails, OrderDetails)

        logger.info("Dependency injection container configured")

    except Exception as e:
        logger.error(f"Error setting up dependency container: {e}")
        raise
