import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import PaymentError


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    def matches(self, query: str) -> bool:
        """Case-insensitive exact comparison against a customer query."""
        return self.name.lower() == query.lower()


class OrderLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: MenuItem
    quantity: int = Field(default=1, ge=0)

    @property
    def subtotal(self) -> Decimal:
        return self.item.price * self.quantity


class Order(BaseModel):
    """A customer's selections for one session.

    Orders are frozen. Adding a line returns a new Order, so the instance
    handed to the main flow can never change underneath it.
    """

    model_config = ConfigDict(frozen=True)

    order_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    lines: tuple[OrderLine, ...] = ()

    @computed_field
    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0"))

    def __add__(self, other: object) -> "Order":
        if not isinstance(other, OrderLine):
            return NotImplemented
        return Order(order_id=self.order_id, lines=(*self.lines, other))


class PaymentAttempt(BaseModel):
    """Result of validating one raw payment input.

    ``amount`` is set whenever the text parsed; ``error`` is set whenever
    the attempt was rejected, including a well-formed but insufficient amount.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    amount: Decimal | None = None
    error: PaymentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Settlement(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Decimal
    total: Decimal
    change: Decimal
