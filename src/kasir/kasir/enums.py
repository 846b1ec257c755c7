from enum import StrEnum


class PaymentState(StrEnum):
    AWAITING_PAYMENT = "awaiting_payment"
    SETTLED = "settled"


class PaymentError(StrEnum):
    INVALID_FORMAT = "invalid_format"
    PARSE_FAILURE = "parse_failure"
    INSUFFICIENT_PAYMENT = "insufficient_payment"
