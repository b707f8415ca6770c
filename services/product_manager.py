# services/product_manager.py
"""
product_manager.py

Factory and orchestration for products and their reviews.

A ProductManager remembers the product it last created or reviewed and the
last review it built, so it belongs to a single caller: it does no locking
and must not be shared.
"""

from __future__ import annotations
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from models.product import Drink, Food, Product
from models.rating import Rating
from models.review import Review
from services.report_service import ReportService

logger = logging.getLogger("shop.manager")


class ProductManager:
    def __init__(self, locale: str = "en_GB"):
        self.report_service = ReportService(locale)
        self.product: Optional[Product] = None
        self.review: Optional[Review] = None

    def create_food_product(
        self,
        id: int,
        name: str,
        price: Decimal,
        rating: Rating,
        best_before: date,
    ) -> Product:
        self.product = Food(id, name, price, rating, best_before)
        logger.info(f"Created food {id} ({name}), best before {best_before}")
        return self.product

    def create_drink_product(self, id: int, name: str, price: Decimal, rating: Rating) -> Product:
        self.product = Drink(id, name, price, rating)
        logger.info(f"Created drink {id} ({name})")
        return self.product

    def review_product(self, product: Product, rating: Rating, comments: str) -> Product:
        # The passed-in product is left as it was; the rated copy becomes current.
        self.review = Review(rating, comments)
        self.product = product.apply_rating(rating)
        logger.info(f"Reviewed product {product.id}: {rating.name}")
        return self.product

    def product_report(self) -> str:
        if self.product is None:
            raise ValueError("No product to report on")
        return self.report_service.product_report(self.product, self.review)
