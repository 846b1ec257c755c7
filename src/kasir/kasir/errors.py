"""Exception types raised by the kasir package.

Validation failures during ordering and payment are not exceptions: they are
reported back to the customer and the loop re-prompts. The types below cover
programming errors and unreadable menu data only.
"""


class KasirError(Exception):
    """Base class for all kasir errors."""


class MenuLoadError(KasirError):
    """A menu document could not be read or did not validate."""


class ChannelError(KasirError):
    """An OrderChannel was used outside its one-shot protocol."""


class SettlementClosedError(KasirError):
    """A payment was submitted after the order was already settled."""
