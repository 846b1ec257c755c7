"""Interactive order collection.

The collector prompts for item names until the customer types the sentinel
word, checking every name against the menu. It runs on its own worker thread
and hands the finished order to the main flow through an OrderChannel.
"""

import re
from concurrent.futures import Future

from loguru import logger

from .catalog import MenuCatalog
from .channel import OrderChannel
from .console import Console
from .models import Order, OrderLine
from .tasks import spawn

DEFAULT_SENTINEL = "selesai"

QUANTITY_PROMPT = "Masukkan jumlah: "
INVALID_ITEM_MESSAGE = "Item tidak valid. Coba lagi."
INVALID_QUANTITY_MESSAGE = "Jumlah tidak valid. Masukkan bilangan bulat 0 atau lebih."

# Capped so int() never sees an oversized digit string
_QUANTITY_PATTERN = re.compile(r"[0-9]{1,9}")


def parse_quantity(raw: str) -> int | None:
    """Parse a non-negative integer quantity, or return None if malformed."""
    text = raw.strip()
    if not _QUANTITY_PATTERN.fullmatch(text):
        return None
    return int(text)


class OrderCollector:
    def __init__(
        self,
        catalog: MenuCatalog,
        console: Console,
        sentinel: str = DEFAULT_SENTINEL,
    ) -> None:
        self.catalog = catalog
        self.console = console
        self.sentinel = sentinel.strip().lower()

    @property
    def item_prompt(self) -> str:
        return f"Masukkan nama item (ketik '{self.sentinel}' untuk menyelesaikan): "

    def collect(self) -> Order:
        """Run the prompt loop and return the finished order.

        Ends on the sentinel word in any letter case, or when input runs
        out. Unknown item names are reported and the loop carries on.
        """
        order = Order()
        while True:
            try:
                raw = self.console.prompt(self.item_prompt)
            except EOFError:
                logger.info("Input closed during order collection")
                break

            name = raw.strip().lower()
            if name == self.sentinel:
                break

            item = self.catalog.find_by_name(name)
            if item is None:
                logger.info("Rejected unknown item {!r}", raw)
                self.console.emit(INVALID_ITEM_MESSAGE)
                continue

            try:
                quantity = self._read_quantity()
            except EOFError:
                logger.info("Input closed before a quantity for {} was given", item.name)
                break

            order = order + OrderLine(item=item, quantity=quantity)
            logger.info("Added {}x {} to order (total {})", quantity, item.name, order.total)

        logger.info("Order {} collected: {} lines, total {}", order.order_id, len(order.lines), order.total)
        return order

    def _read_quantity(self) -> int:
        while True:
            raw = self.console.prompt(QUANTITY_PROMPT)
            quantity = parse_quantity(raw)
            if quantity is not None:
                return quantity
            logger.info("Rejected quantity {!r}", raw)
            self.console.emit(INVALID_QUANTITY_MESSAGE)


def _produce(collector: OrderCollector, channel: OrderChannel) -> Order:
    try:
        order = collector.collect()
        channel.send(order)
        return order
    finally:
        channel.close()


def start_collection(collector: OrderCollector, channel: OrderChannel) -> Future:
    """Run ``collector`` on a worker thread, delivering its order into ``channel``.

    The returned future is the join handle: its ``result()`` waits for the
    producer to finish and re-raises anything the producer raised. The
    channel is closed either way.
    """
    return spawn(_produce, collector, channel, name="order-collector")
