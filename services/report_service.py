# services/report_service.py
from __future__ import annotations
from datetime import date
from decimal import Decimal
from typing import Optional

from models.product import Food, Product
from models.review import Review
# report_service.py renders the product report in one of the supported locales.
# Locale only changes how values look, never how they are computed.

LOCALES = {
    "en_GB": {
        "currency": "£{amount}",
        "decimal_sep": ".",
        "group_sep": ",",
        "date_format": "{day:02d}/{month:02d}/{year}",
        "product": "{name}, price {price}, rating {stars}",
        "food": "{name}, price {price}, rating {stars}, best before {best_before}",
        "review": "Review: {stars}\t{comments}",
        "no_review": "Not reviewed",
    },
    "en_US": {
        "currency": "${amount}",
        "decimal_sep": ".",
        "group_sep": ",",
        "date_format": "{month}/{day}/{short_year:02d}",
        "product": "{name}, price {price}, rating {stars}",
        "food": "{name}, price {price}, rating {stars}, best before {best_before}",
        "review": "Review: {stars}\t{comments}",
        "no_review": "Not reviewed",
    },
    "fr_FR": {
        "currency": "{amount} €",
        "decimal_sep": ",",
        "group_sep": "\u202f",
        "date_format": "{day:02d}/{month:02d}/{year}",
        "product": "{name}, prix {price}, note {stars}",
        "food": "{name}, prix {price}, note {stars}, à consommer avant le {best_before}",
        "review": "Avis : {stars}\t{comments}",
        "no_review": "Pas d'avis",
    },
}


class ReportService:
    def __init__(self, locale: str = "en_GB"):
        if locale not in LOCALES:
            raise ValueError(f"Unsupported locale: {locale}")
        self.locale = locale
        self.messages = LOCALES[locale]

    def format_price(self, amount: Decimal) -> str:
        # "1,234.50" first, then swap in the locale's separators
        text = f"{amount:,.2f}"
        text = (
            text.replace(",", "\0")
            .replace(".", self.messages["decimal_sep"])
            .replace("\0", self.messages["group_sep"])
        )
        return self.messages["currency"].format(amount=text)

    def format_date(self, value: date) -> str:
        # short style: en_US drops leading zeros (6/3/24), strftime cannot do that portably
        return self.messages["date_format"].format(
            day=value.day, month=value.month, year=value.year, short_year=value.year % 100
        )

    def product_report(self, product: Product, review: Optional[Review] = None) -> str:
        fields = {
            "name": product.name,
            "price": self.format_price(product.price),
            "stars": product.rating.stars,
        }
        if isinstance(product, Food):
            line = self.messages["food"].format(
                best_before=self.format_date(product.best_before), **fields
            )
        else:
            line = self.messages["product"].format(**fields)

        if review is not None:
            review_line = self.messages["review"].format(
                stars=review.rating.stars, comments=review.comments
            )
        else:
            review_line = self.messages["no_review"]
        return f"{line}\n{review_line}"
