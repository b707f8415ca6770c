# models/product.py
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import ClassVar, Optional

from models.rateable import Rateable
from models.rating import Rating
from services.pricing_service import (
    AlwaysRule,
    BestBeforeDayRule,
    DiscountRule,
    HappyHourRule,
)
# Product models: the plain product plus its Drink and Food variants.
# Variants only change when the discount is active, never the rate.

CENT = Decimal("0.01")


@dataclass(frozen=True, eq=False)
class Product(Rateable):
    id: int
    name: str
    price: Decimal
    rating: Rating = Rating.NOT_RATED

    discount_rule: ClassVar[DiscountRule] = AlwaysRule()

    def __post_init__(self):
        price = self.price
        if not isinstance(price, Decimal):
            # go through str() so 1.99 stays 1.99 instead of its binary expansion
            try:
                price = Decimal(str(price))
            except InvalidOperation:
                raise ValueError(f"Price is not a number: {self.price!r}") from None
        if not price.is_finite():
            raise ValueError(f"Price must be finite: {price}")
        if price < 0:
            raise ValueError(f"Price must not be negative: {price}")
        # prices are kept in cents: 2 -> 2.00, 1.999 -> 2.00
        object.__setattr__(self, "price", price.quantize(CENT, rounding=ROUND_HALF_UP))

    def discount(self, now: Optional[datetime] = None) -> Decimal:
        return self.discount_rule.discount(self, now)

    def apply_rating(self, rating: Rating) -> Product:
        # same concrete class, every other field copied
        return replace(self, rating=rating)

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id and self.name == other.name

    def __hash__(self):
        # id only: products sharing an id collide even when names differ
        return 41 * 7 + self.id

    def __str__(self):
        return f"{self.id}, {self.name}, {self.price}, {self.discount()}, {self.rating.stars}"


class Drink(Product):
    # Discounted during happy hour only.
    discount_rule = HappyHourRule()


@dataclass(frozen=True, eq=False)
class Food(Product):
    best_before: Optional[date] = None

    discount_rule = BestBeforeDayRule()

    def __post_init__(self):
        super().__post_init__()
        if self.best_before is None:
            raise ValueError(f"Food product {self.id} requires a best-before date")

    def __str__(self):
        return f"{super().__str__()}, {self.best_before}"
