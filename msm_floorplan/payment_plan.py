"""
Payment plan calculation for the unit purchase modal.

A plan is one down payment followed by monthly installments:

- Down payment: 30% of the price, due on the chosen date (installment 0).
- Installments: the remaining 70% in 20 equal monthly amounts. The last
  installment absorbs the rounding remainder so the plan sums to the price.
  For very small prices the regular installment is rounded down instead,
  so no line is negative.
- Installment k is due k calendar months after the down payment date; the
  day is clamped to the month end (31 Jan -> 29 Feb -> 31 Mar).
"""

import logging
import math
from datetime import date, datetime
from typing import List, Union

from dateutil.relativedelta import relativedelta

from msm_floorplan.config import DOWN_PAYMENT_RATIO, INSTALLMENT_COUNT
from msm_floorplan.models import PaymentPlanItem
from msm_floorplan.pricing import round_half_up

logger = logging.getLogger(__name__)

DOWN_PAYMENT_DESCRIPTION = "Peşinat (%{percent})"
INSTALLMENT_DESCRIPTION = "{number}. Taksit"


def _to_date(value: Union[date, datetime, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


class PaymentPlanCalculator:
    """
    Builds down payment + installment schedules.

    Pure: the same (price, date) always yields the same plan.
    """

    def __init__(
        self,
        down_payment_ratio: float = DOWN_PAYMENT_RATIO,
        installment_count: int = INSTALLMENT_COUNT,
    ) -> None:
        """
        Initialize payment plan calculator.

        Args:
            down_payment_ratio: Share of the price due up front (0-1).
                               Default is 0.30.
            installment_count: Number of monthly installments. Default is 20.
        """
        if not 0 <= down_payment_ratio <= 1:
            raise ValueError("down_payment_ratio must be between 0 and 1")
        if installment_count < 1:
            raise ValueError("installment_count must be at least 1")
        self.down_payment_ratio = down_payment_ratio
        self.installment_count = installment_count

    def calculate(
        self,
        price: float,
        down_payment_date: Union[date, datetime, str],
    ) -> List[PaymentPlanItem]:
        """
        Calculate the schedule for ``price``.

        Args:
            price: Total sale price. A price <= 0 gives zero-amount lines.
            down_payment_date: Date of the down payment (date or ISO string).

        Returns:
            installment_count + 1 items, down payment first.

        Raises:
            ValueError: If ``price`` is not finite or ``down_payment_date``
                        is not a valid ISO date.
        """
        if price is not None and not math.isfinite(price):
            raise ValueError(f"price must be a finite number, got {price}")
        start = _to_date(down_payment_date)
        price = price if price and price > 0 else 0

        down_payment = round_half_up(price * self.down_payment_ratio)
        installment = round_half_up(
            price * (1 - self.down_payment_ratio) / self.installment_count
        )
        remaining = price - down_payment
        if installment * (self.installment_count - 1) > remaining:
            # tiny prices: round down so the last installment stays >= 0
            installment = math.floor(remaining / self.installment_count)
        last_installment = remaining - installment * (self.installment_count - 1)

        plan = [
            PaymentPlanItem(
                installment_no=0,
                date=start.isoformat(),
                amount=down_payment,
                description=DOWN_PAYMENT_DESCRIPTION.format(
                    percent=round_half_up(self.down_payment_ratio * 100)
                ),
            )
        ]
        for number in range(1, self.installment_count + 1):
            due = start + relativedelta(months=number)
            amount = last_installment if number == self.installment_count else installment
            plan.append(
                PaymentPlanItem(
                    installment_no=number,
                    date=due.isoformat(),
                    amount=amount,
                    description=INSTALLMENT_DESCRIPTION.format(number=number),
                )
            )

        logger.debug(
            f"Payment plan: price={price}, down={down_payment}, "
            f"installment={installment}, last={last_installment}"
        )
        return plan


def calculate_payment_plan(
    price: float,
    down_payment_date: Union[date, datetime, str],
) -> List[PaymentPlanItem]:
    """
    Convenience function for the default 30% + 20 installment plan.

    Example:
        >>> plan = calculate_payment_plan(1_000_000, "2024-01-31")
        >>> plan[1].date
        '2024-02-29'
    """
    return PaymentPlanCalculator().calculate(price, down_payment_date)
