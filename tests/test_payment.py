import string

import pytest

from storefront.config import Config
from storefront.core.container import DependencyContainer
from storefront.core.interfaces import IPaymentGateway
from storefront.core.service_factory import PaymentServiceFactory, register_services
from storefront.services import OrderDetails
from storefront.services.payment import BankPaymentGateway, CreditPaymentGateway


def test_bank_gateway_applies_discount_without_fees():
    gateway = BankPaymentGateway("USD")
    gateway.set_discount(20)

    result = gateway.charge(50)

    assert result["amount"] == 30
    assert result["discount"] == 20
    assert result["currency"] == "USD"
    assert "fees" not in result


def test_credit_gateway_adds_three_percent_fee():
    gateway = CreditPaymentGateway("USD")
    gateway.set_discount(20)

    result = gateway.charge(50)

    assert result["amount"] == pytest.approx(31.5)
    assert result["discount"] == 20
    assert result["fees"] == pytest.approx(1.5)


def test_discount_defaults_to_zero():
    assert BankPaymentGateway("EUR").charge(10)["amount"] == 10
    assert CreditPaymentGateway("EUR").charge(100)["amount"] == pytest.approx(103)


def test_negative_discount_is_accepted():
    gateway = BankPaymentGateway("USD")
    gateway.set_discount(-5)

    assert gateway.charge(50)["amount"] == 55


def test_confirmation_number_is_random_alphanumeric():
    gateway = BankPaymentGateway("USD")
    first = gateway.charge(1)["confirmation_number"]
    second = gateway.charge(1)["confirmation_number"]

    assert len(first) == 16
    assert set(first) <= set(string.ascii_letters + string.digits)
    assert first != second


def test_factory_picks_gateway_from_selector():
    config = Config({"PAYMENT_CURRENCY": "BRL"})

    credit = PaymentServiceFactory(config, lambda: "credit").create_payment_gateway()
    bank = PaymentServiceFactory(config, lambda: "bank").create_payment_gateway()
    fallback = PaymentServiceFactory(config, lambda: None).create_payment_gateway()

    assert isinstance(credit, CreditPaymentGateway)
    assert isinstance(bank, BankPaymentGateway)
    assert isinstance(fallback, BankPaymentGateway)
    assert credit.currency == "BRL"


@pytest.fixture
def wired(tmp_path):
    selected = {"method": "credit"}
    target = DependencyContainer()
    config = Config({"DATABASE_PATH": str(tmp_path / "wired.db")})
    register_services(target, config, payment_selector=lambda: selected["method"])
    return target, selected


def test_gateway_selection_happens_once_per_scope(wired):
    target, selected = wired

    with target.scope():
        first = target.resolve(IPaymentGateway)
        selected["method"] = "bank"
        assert target.resolve(IPaymentGateway) is first
        assert isinstance(first, CreditPaymentGateway)

    with target.scope():
        assert isinstance(target.resolve(IPaymentGateway), BankPaymentGateway)


def test_order_discount_visible_through_singleton_gateway(wired):
    target, _ = wired

    with target.scope():
        order = target.resolve(OrderDetails)
        details = order.all()
        result = target.resolve(IPaymentGateway).charge(50)

    assert details["name"] == "Victor"
    assert result["discount"] == 20
    assert result["amount"] == pytest.approx(31.5)
    assert result["fees"] == pytest.approx(1.5)


def test_order_details_is_transient(wired):
    target, _ = wired

    with target.scope():
        first = target.resolve(OrderDetails)
        second = target.resolve(OrderDetails)

    assert first is not second
    assert first.payment_gateway is second.payment_gateway
