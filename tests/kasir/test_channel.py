"""Tests for the one-shot order channel."""

import threading

import pytest

from kasir.channel import OrderChannel
from kasir.errors import ChannelError
from kasir.models import Order


class TestOrderChannel:
    """Single-slot, single-use handoff semantics."""

    def test_send_then_receive(self, empty_order: Order):
        """A sent order should be received unchanged."""
        channel = OrderChannel()
        channel.send(empty_order)
        channel.close()
        assert channel.receive() is empty_order

    def test_close_without_send_yields_none(self):
        """Closing without sending should deliver the end-of-stream signal."""
        channel = OrderChannel()
        channel.close()
        assert channel.receive() is None

    def test_second_send_raises(self, empty_order: Order):
        """Only one order may travel through a channel."""
        channel = OrderChannel()
        channel.send(empty_order)
        with pytest.raises(ChannelError):
            channel.send(Order())

    def test_send_after_close_raises(self, empty_order: Order):
        """A closed channel should refuse new orders."""
        channel = OrderChannel()
        channel.close()
        with pytest.raises(ChannelError):
            channel.send(empty_order)

    def test_second_receive_raises(self, empty_order: Order):
        """The channel can only be received from once."""
        channel = OrderChannel()
        channel.send(empty_order)
        channel.receive()
        with pytest.raises(ChannelError):
            channel.receive()

    def test_receive_blocks_until_send(self, empty_order: Order):
        """receive() should wait for a producer on another thread."""
        channel = OrderChannel()
        timer = threading.Timer(0.05, channel.send, args=(empty_order,))
        timer.start()
        try:
            assert channel.receive(timeout=5) is empty_order
        finally:
            timer.join()

    def test_receive_timeout_raises(self):
        """A receive with a timeout and no producer should fail."""
        channel = OrderChannel()
        with pytest.raises(ChannelError):
            channel.receive(timeout=0.01)
