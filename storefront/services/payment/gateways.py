# storefront/services/payment/gateways.py
"""
Payment gateway implementations of IPaymentGateway.
Both are interchangeable behind the contract; the service provider picks one.
"""

import secrets
import string
from typing import Any, Dict

from storefront.core.interfaces import IPaymentGateway

CONFIRMATION_ALPHABET = string.ascii_letters + string.digits
CONFIRMATION_LENGTH = 16
CREDIT_FEE_RATE = 0.03


def confirmation_number(length: int = CONFIRMATION_LENGTH) -> str:
    """Random alphanumeric confirmation number"""
    return "".join(secrets.choice(CONFIRMATION_ALPHABET) for _ in range(length))


class BankPaymentGateway(IPaymentGateway):
    """Charges a bank account; no fees"""

    def __init__(self, currency: str):
        self.currency = currency
        self.discount = 0

    def charge(self, amount: float) -> Dict[str, Any]:
        return {
            "amount": amount - self.discount,
            "discount": self.discount,
            "confirmation_number": confirmation_number(),
            "currency": self.currency,
        }

    def set_discount(self, discount: float) -> None:
        self.discount = discount


class CreditPaymentGateway(IPaymentGateway):
    """Charges a credit card; adds a 3% fee on the full amount"""

    def __init__(self, currency: str):
        self.currency = currency
        self.discount = 0

    def charge(self, amount: float) -> Dict[str, Any]:
        fees = amount * CREDIT_FEE_RATE

        return {
            "amount": (amount - self.discount) + fees,
            "discount": self.discount,
            "confirmation_number": confirmation_number(),
            "currency": self.currency,
            "fees": fees,
        }

    def set_discount(self, discount: float) -> None:
        self.discount = discount
