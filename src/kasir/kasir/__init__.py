"""Warung Kasir: console order taking and payment for a single restaurant."""

from .catalog import MenuCatalog
from .channel import OrderChannel
from .collector import OrderCollector, start_collection
from .encoder import decode_order, encode_order
from .enums import PaymentError, PaymentState
from .models import MenuItem, Order, OrderLine, PaymentAttempt, Settlement
from .payment import PaymentSettler, validate_payment

__all__ = [
    "MenuCatalog",
    "MenuItem",
    "Order",
    "OrderChannel",
    "OrderCollector",
    "OrderLine",
    "PaymentAttempt",
    "PaymentError",
    "PaymentSettler",
    "PaymentState",
    "Settlement",
    "decode_order",
    "encode_order",
    "start_collection",
    "validate_payment",
]
