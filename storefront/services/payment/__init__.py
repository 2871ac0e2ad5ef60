"""
Payment services.
"""
from .gateways import BankPaymentGateway, CreditPaymentGateway

__all__ = ["BankPaymentGateway", "CreditPaymentGateway"]
