# shop.py
import sys
from datetime import date, timedelta
from decimal import Decimal

from utils.logger import setup_logger
from data.repository import DataRepository
from models.product import Drink, Food
from models.rating import Rating
from services.product_manager import ProductManager


def main():
    repo = DataRepository()
    settings = repo.get_settings()
    logger = setup_logger(level=settings["log_level"])

    try:
        pm = ProductManager(settings["locale"])
    except ValueError:
        logger.exception("Shop: could not start product manager")
        return 1

    today = date.today()
    p1 = pm.create_drink_product(101, "Tea", Decimal("1.99"), Rating.THREE_STAR)
    p2 = pm.create_drink_product(102, "Coffee", Decimal("1.99"), Rating.FOUR_STAR)
    p3 = pm.create_food_product(103, "Cake", Decimal("3.99"), Rating.FIVE_STAR, today + timedelta(days=2))
    p4 = pm.create_food_product(105, "Cookie", Decimal("3.99"), Rating.TWO_STAR, today)
    p5 = p3.apply_rating(Rating.NOT_RATED)
    p6 = Drink(104, "Chocolate", Decimal("2.99"), Rating.FOUR_STAR)
    p7 = Food(104, "Chocolate", Decimal("2.99"), Rating.FIVE_STAR, today + timedelta(days=2))
    p8 = p4.apply_rating(Rating.FIVE_STAR)
    p9 = p1.apply_rating(Rating.TWO_STAR)

    # same id and name, different kinds of product
    print(p6 == p7)
    print("=" * 52)
    for p in (p1, p2, p3, p4, p5, p6, p7, p8, p9):
        print(p)

    pm.review_product(p3, Rating.FOUR_STAR, "Nice hot cup of tea")
    print("=" * 52)
    print(pm.product_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
