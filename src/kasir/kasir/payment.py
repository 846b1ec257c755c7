"""Payment validation and settlement.

The settler is a two-state machine: it stays in AWAITING_PAYMENT until a
well-formed amount at least as large as the total is submitted, then moves
to SETTLED and reports the change. There is no attempt limit.
"""

import re
from decimal import Decimal, InvalidOperation

from loguru import logger

from .console import Console
from .display import DEFAULT_CURRENCY_PREFIX, format_price
from .enums import PaymentError, PaymentState
from .errors import SettlementClosedError
from .models import PaymentAttempt, Settlement

PAYMENT_PROMPT = "Masukkan jumlah yang dibayar:"

REJECTION_MESSAGES: dict[PaymentError, str] = {
    PaymentError.INVALID_FORMAT: "Input pembayaran tidak valid. Harap masukkan angka yang benar.",
    PaymentError.PARSE_FAILURE: "Input pembayaran tidak valid. Harap masukkan angka yang benar.",
    PaymentError.INSUFFICIENT_PAYMENT: "Jumlah yang dibayar kurang dari total pesanan. Coba lagi.",
}

# Digits with an optional fractional part. No sign, no separators.
_AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")


def validate_payment(raw: str) -> PaymentAttempt:
    """Check ``raw`` against the payment grammar and parse it.

    Surrounding whitespace is ignored. Returns an attempt carrying either the
    parsed amount or INVALID_FORMAT / PARSE_FAILURE.
    """
    text = raw.strip()
    if not _AMOUNT_PATTERN.fullmatch(text):
        return PaymentAttempt(raw=raw, error=PaymentError.INVALID_FORMAT)
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return PaymentAttempt(raw=raw, error=PaymentError.PARSE_FAILURE)
    return PaymentAttempt(raw=raw, amount=amount)


class PaymentSettler:
    def __init__(
        self,
        total: Decimal,
        console: Console | None = None,
        currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
    ) -> None:
        self.total = total
        self.console = console
        self.currency_prefix = currency_prefix
        self.state = PaymentState.AWAITING_PAYMENT
        self.settlement: Settlement | None = None

    def submit(self, raw: str) -> PaymentAttempt:
        """Apply one payment input to the state machine.

        A rejected attempt leaves the settler in AWAITING_PAYMENT. A sufficient
        amount records the settlement and moves to SETTLED.
        """
        if self.state is PaymentState.SETTLED:
            raise SettlementClosedError("order is already settled")

        attempt = validate_payment(raw)
        if not attempt.ok:
            logger.info("Rejected payment {!r}: {}", raw, attempt.error)
            return attempt

        if attempt.amount < self.total:
            logger.info("Rejected payment {}: less than total {}", attempt.amount, self.total)
            return attempt.model_copy(update={"error": PaymentError.INSUFFICIENT_PAYMENT})

        self.settlement = Settlement(
            amount=attempt.amount,
            total=self.total,
            change=attempt.amount - self.total,
        )
        self.state = PaymentState.SETTLED
        logger.info("Payment settled: paid {}, change {}", self.settlement.amount, self.settlement.change)
        return attempt

    def settle(self) -> Settlement | None:
        """Prompt until the order is settled.

        Returns None if input runs out first.
        """
        if self.console is None:
            raise ValueError("settle() needs a console; use submit() instead")

        while self.state is PaymentState.AWAITING_PAYMENT:
            try:
                raw = self.console.prompt(PAYMENT_PROMPT)
            except EOFError:
                logger.warning("Input closed before payment was settled")
                return None

            attempt = self.submit(raw)
            if attempt.error is not None:
                self.console.emit(REJECTION_MESSAGES[attempt.error])

        change = format_price(self.settlement.change, self.currency_prefix)
        self.console.emit(f"Jumlah yang dibayar valid. Kembalian: {change}")
        return self.settlement
