"""One-shot handoff of a completed order between threads."""

import threading

from loguru import logger

from .errors import ChannelError
from .models import Order


class OrderChannel:
    """Single-slot, single-use channel for exactly one Order.

    The producer calls ``send`` at most once and then ``close``. The consumer
    calls ``receive`` once; it blocks until an order was sent or the channel
    was closed, and returns ``None`` when the producer closed without sending.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._order: Order | None = None
        self._sent = False
        self._closed = False
        self._received = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, order: Order) -> None:
        with self._cond:
            if self._closed:
                raise ChannelError("send on closed channel")
            if self._sent:
                raise ChannelError("channel already carries an order")
            self._order = order
            self._sent = True
            self._cond.notify_all()
        logger.debug("Order {} handed off ({} lines)", order.order_id, len(order.lines))

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def receive(self, timeout: float | None = None) -> Order | None:
        """Block until the order arrives or the channel closes.

        Raises ChannelError on a second receive, or if ``timeout`` elapses
        with nothing to deliver.
        """
        with self._cond:
            if self._received:
                raise ChannelError("channel already received")
            ready = self._cond.wait_for(lambda: self._sent or self._closed, timeout=timeout)
            if not ready:
                raise ChannelError(f"no order received within {timeout} seconds")
            self._received = True
            order, self._order = self._order, None
        if order is None:
            logger.warning("Order channel closed without an order")
        return order
