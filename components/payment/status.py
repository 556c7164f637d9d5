"""Booking payment status values and labels."""

from enum import Enum
from typing import Optional

from components.payment.schemas import PaymentSummary


class PaymentStatus(str, Enum):
    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"
    OVERPAID = "overpaid"


PAYMENT_STATUS_LABELS = {
    PaymentStatus.UNPAID: "Nieopłacona",
    PaymentStatus.PARTIAL: "Częściowa",
    PaymentStatus.PAID: "Opłacona",
    PaymentStatus.OVERPAID: "Nadpłata",
}
UNKNOWN_STATUS_LABEL = "Nieznany"


def derive_payment_status(summary: PaymentSummary) -> PaymentStatus:
    """Status a booking should carry after its payments were summed."""
    if summary.is_overpaid:
        return PaymentStatus.OVERPAID
    if summary.is_fully_paid:
        return PaymentStatus.PAID
    if summary.total_paid > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.UNPAID


def get_payment_status_label(status: Optional[str]) -> str:
    """Polish label of a stored status; empty or unknown values get "Nieznany"."""
    if not status:
        return UNKNOWN_STATUS_LABEL
    try:
        return PAYMENT_STATUS_LABELS[PaymentStatus(status)]
    except ValueError:
        return UNKNOWN_STATUS_LABEL
