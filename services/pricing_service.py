# services/pricing_service.py

from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime, time
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

# 10% off, whenever a product's rule says the discount is active
DISCOUNT_RATE = Decimal("0.1")

HAPPY_HOUR_START = time(17, 30)
HAPPY_HOUR_END = time(18, 30)

NO_DISCOUNT = Decimal("0.00")


def base_discount(price: Decimal, rate: Decimal = DISCOUNT_RATE) -> Decimal:
    # Discount amount rounded to cents, halves rounded up (1.99 -> 0.20).
    return (price * rate).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


class DiscountRule(ABC):
    # Abstract base class for discount eligibility.
    # A rule only decides *when* the base discount applies; the rate is shared.

    @abstractmethod
    def applies(self, product: Any, now: datetime) -> bool:
        pass

    def discount(self, product: Any, now: Optional[datetime] = None) -> Decimal:
        # get "now" from the caller if provided for testability,
        # otherwise use real current time
        if now is None:
            now = datetime.now()
        if self.applies(product, now):
            return base_discount(product.price)
        return NO_DISCOUNT


class AlwaysRule(DiscountRule):
    # Plain products: always discounted.

    def applies(self, product, now):
        return True


class HappyHourRule(DiscountRule):
    # 'Happy Hour' pricing during a time window.
    # Both ends are excluded: exactly 17:30:00 or 18:30:00 gets nothing.

    def __init__(self, start_time: time = HAPPY_HOUR_START, end_time: time = HAPPY_HOUR_END):
        if start_time >= end_time:
            raise ValueError(
                f"Happy hour must start before it ends: {start_time} - {end_time}"
            )
        self.start_time = start_time
        self.end_time = end_time

    def applies(self, product, now):
        return self.start_time < now.time() < self.end_time


class BestBeforeDayRule(DiscountRule):
    """
    Discount only on the calendar day the product is best before.
    Time of day plays no part.
    """

    def applies(self, product, now):
        return product.best_before == now.date()
