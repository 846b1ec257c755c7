"""Opaque order summary for display and audit.

Each line is rendered as ``name:price,`` with the unit price to two decimal
places, and the concatenation is base64 encoded.
"""

import base64
from decimal import Decimal

from .models import Order


def _format_line_price(price: Decimal) -> str:
    return f"{price:.2f}"


def encode_order(order: Order) -> str:
    details = "".join(f"{line.item.name}:{_format_line_price(line.item.price)}," for line in order.lines)
    return base64.b64encode(details.encode("utf-8")).decode("ascii")


def decode_order(encoded: str) -> list[tuple[str, Decimal]]:
    """Invert encode_order into ``(name, price)`` pairs.

    Names containing ``:`` or ``,`` do not survive the round trip.
    """
    details = base64.b64decode(encoded.encode("ascii"), validate=True).decode("utf-8")
    pairs = []
    for chunk in details.split(","):
        if not chunk:
            continue
        name, _, price = chunk.rpartition(":")
        pairs.append((name, Decimal(price)))
    return pairs
