"""Human-readable rendering of menus, orders and amounts."""

from decimal import Decimal

from .catalog import MenuCatalog
from .models import Order

DEFAULT_CURRENCY_PREFIX = "Rp"


def format_price(amount: Decimal, prefix: str = DEFAULT_CURRENCY_PREFIX) -> str:
    """Render an amount with exactly two fractional digits, e.g. ``Rp25000.00``."""
    return f"{prefix}{amount:.2f}"


def render_menu(catalog: MenuCatalog, prefix: str = DEFAULT_CURRENCY_PREFIX) -> list[str]:
    lines = ["Menu:"]
    lines.extend(f"{item.name}: {format_price(item.price, prefix)}" for item in catalog)
    return lines


def render_order_summary(order: Order, prefix: str = DEFAULT_CURRENCY_PREFIX) -> list[str]:
    lines = ["Pesanan Anda:"]
    lines.extend(f"- {line.quantity}x {line.item.name}" for line in order.lines)
    lines.append(f"Total Pesanan: {format_price(order.total, prefix)}")
    return lines
