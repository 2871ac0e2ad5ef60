# storefront/services/orders.py

from typing import Dict

from storefront.core.interfaces import IPaymentGateway

ORDER_DISCOUNT = 20


class OrderDetails:
    """
    Order details for the checkout flow.
    Applies the order discount on the injected gateway; when the gateway is a
    singleton the controller charging afterwards sees the same discount.
    """

    def __init__(self, payment_gateway: IPaymentGateway):
        self.payment_gateway = payment_gateway

    def all(self) -> Dict[str, str]:
        self.payment_gateway.set_discount(ORDER_DISCOUNT)

        return {
            "name": "Victor",
            "address": "123 Coder's Tape Street",
        }
