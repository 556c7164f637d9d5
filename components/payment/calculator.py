"""Payment balance and payment plan calculations.

All amounts are integers in minor currency units (grosz), so sums and
comparisons are exact. Both functions are pure and never raise for their
documented inputs: missing amounts and prices count as zero.
"""

from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any, Iterable, List, Mapping as MappingType, Optional, Union

from components.payment import models
from components.payment.schemas import PaymentPlanInstallment, PaymentRecord, PaymentSummary

DEPOSIT_DUE_DAYS = 7
BALANCE_DUE_DAYS_BEFORE_START = 14
DEPOSIT_LABEL = "Zaliczka (50%)"
BALANCE_LABEL = "Pozostała kwota (50%)"

DateLike = Union[date, datetime, str]
PaymentLike = Union[models.Payment, PaymentRecord, MappingType[str, Any]]


def _amount_of(payment: PaymentLike) -> int:
    """Read amount_cents from an ORM row, a schema or a plain mapping."""
    if isinstance(payment, Mapping):
        amount = payment.get("amount_cents")
    else:
        amount = getattr(payment, "amount_cents", None)
    return amount or 0


def _as_date(value: DateLike) -> date:
    """Calendar date of a date, datetime or ISO date/timestamp string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def calculate_payment_balance(
    trip_price_cents: Optional[int],
    payments: Iterable[PaymentLike],
) -> PaymentSummary:
    """
    Calculate the payment balance of a booking.

    Returns the total paid, the amount due, the outstanding balance
    (negative when overpaid) and the overpaid/fully paid flags.
    """
    total_paid = sum(_amount_of(payment) for payment in payments)
    total_due = trip_price_cents or 0
    balance = total_due - total_paid

    return PaymentSummary(
        total_paid=total_paid,
        total_due=total_due,
        balance=balance,
        is_overpaid=total_paid > total_due,
        is_fully_paid=total_paid >= total_due,
    )


def generate_payment_plan(
    trip_price_cents: Optional[int],
    trip_start_date: Optional[DateLike],
    *,
    today: Optional[date] = None,
) -> List[PaymentPlanInstallment]:
    """
    Generate the default payment plan: 50% deposit, 50% before departure.

    The deposit is due 7 days after today. The remainder is due 14 days
    before the trip starts, or together with the deposit when the start
    date is unknown. Due dates are not reordered: a trip starting within
    two weeks gets a balance due date on or before the deposit due date.
    """
    if not trip_price_cents:
        return []

    # Math.round semantics: halves round up
    deposit_amount = (trip_price_cents + 1) // 2
    remainder_amount = trip_price_cents - deposit_amount

    deposit_due = (today or date.today()) + timedelta(days=DEPOSIT_DUE_DAYS)
    if trip_start_date:
        balance_due = _as_date(trip_start_date) - timedelta(days=BALANCE_DUE_DAYS_BEFORE_START)
    else:
        balance_due = deposit_due

    return [
        PaymentPlanInstallment(
            due_date=deposit_due,
            amount_cents=deposit_amount,
            label=DEPOSIT_LABEL,
        ),
        PaymentPlanInstallment(
            due_date=balance_due,
            amount_cents=remainder_amount,
            label=BALANCE_LABEL,
        ),
    ]
