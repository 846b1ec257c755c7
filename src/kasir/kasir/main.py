"""CLI entry point for the warung cashier.

Usage:
    kasir
    python -m kasir.main
"""

import time
from concurrent.futures import Future

from loguru import logger

from .catalog import MenuCatalog
from .channel import OrderChannel
from .collector import OrderCollector, start_collection
from .config import Settings, get_settings
from .console import Console, TerminalConsole
from .display import render_menu, render_order_summary
from .encoder import encode_order
from .logging import setup_logging
from .models import Order, OrderLine, Settlement
from .payment import PaymentSettler
from .tasks import spawn


def load_catalog(settings: Settings) -> MenuCatalog:
    """Load the menu file named in settings, or the built-in house menu."""
    if settings.menu_json_path:
        return MenuCatalog.from_json_file(settings.menu_json_path)
    return MenuCatalog.default()


def _process_order(console: Console, delay: float) -> None:
    console.emit("Memproses pesanan di thread lain...")
    time.sleep(delay)
    logger.debug("Order processing finished after {}s", delay)


def start_processing(console: Console, delay: float) -> Future:
    """Simulate back-office processing on a worker thread."""
    return spawn(_process_order, console, delay, name="order-processing")


def run_session(catalog: MenuCatalog, console: Console, settings: Settings) -> Settlement | None:
    """Run one customer session: menu, ordering, summary, payment, processing.

    Returns the settlement, or None if input ran out before payment was
    settled. Blocks for as long as the customer takes; there is no timeout.
    """
    prefix = settings.currency_prefix
    for line in render_menu(catalog, prefix):
        console.emit(line)

    # The collector owns the console until its handle is joined
    channel = OrderChannel()
    collector = OrderCollector(catalog, console, sentinel=settings.sentinel)
    handle = start_collection(collector, channel)
    handle.result()

    order = channel.receive()
    if order is None:
        console.emit("Tidak ada pesanan yang diterima.")
        return None

    for line in render_order_summary(order, prefix):
        console.emit(line)
    # The encoded summary covers the whole menu, one line per item
    menu_order = Order(lines=[OrderLine(item=item) for item in catalog.list_all()])
    console.emit(f"Pesanan (encoded base64): {encode_order(menu_order)}")

    settlement = PaymentSettler(order.total, console, currency_prefix=prefix).settle()
    if settlement is None:
        console.emit("Pembayaran dibatalkan.")
        return None

    start_processing(console, settings.processing_delay_seconds).result()
    console.emit("Program selesai")
    return settlement


def main() -> None:
    """Run the cashier CLI."""
    settings = get_settings()

    # Initialize logging first (stderr + rotating file)
    setup_logging(
        level=settings.log_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    )
    logger.info("Starting kasir")

    catalog = load_catalog(settings)
    logger.info("Menu loaded: {} ({} items)", catalog.name, len(catalog))

    try:
        settlement = run_session(catalog, TerminalConsole(), settings)
    except KeyboardInterrupt:
        print("\nSampai jumpa!")
        logger.info("Session interrupted")
        return

    logger.info("Session ended (settled={})", settlement is not None)


if __name__ == "__main__":
    main()
