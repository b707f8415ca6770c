"""
Unit tests for Product, Drink and Food.
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from models.product import Drink, Food, Product
from models.rateable import Rateable
from models.rating import Rating


HAPPY_HOUR = datetime(2024, 6, 1, 18, 0)
MORNING = datetime(2024, 6, 1, 9, 0)


def test_defaults_and_price_normalisation():
    product = Product(101, "Tea", 1.99)
    assert product.rating is Rating.NOT_RATED
    assert product.price == Decimal("1.99")
    assert isinstance(product, Rateable)


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        Product(101, "Tea", Decimal("-0.01"))


@pytest.mark.parametrize("price", [
    "abc",
    float("nan"),
    Decimal("NaN"),
    Decimal("Infinity"),
    float("inf"),
])
def test_malformed_or_non_finite_price_rejected(price):
    with pytest.raises(ValueError):
        Product(101, "Tea", price)


@pytest.mark.parametrize("price, expected", [
    (2, "2.00"),
    ("1.999", "2.00"),
    ("1.994", "1.99"),
    (Decimal("3.5"), "3.50"),
])
def test_price_kept_to_two_decimals(price, expected):
    product = Product(1, "Water", price)
    assert str(product.price) == expected
    assert str(product) == f"1, Water, {expected}, {product.discount()}, ☆☆☆☆☆"


def test_food_requires_best_before():
    with pytest.raises(ValueError):
        Food(103, "Cake", Decimal("3.99"), Rating.FIVE_STAR)


def test_products_are_frozen():
    product = Drink(101, "Tea", Decimal("1.99"), Rating.THREE_STAR)
    with pytest.raises(FrozenInstanceError):
        product.rating = Rating.ONE_STAR


def test_plain_product_always_discounted():
    product = Product(101, "Tea", Decimal("1.99"))
    assert product.discount(MORNING) == Decimal("0.20")


def test_drink_discount_only_in_happy_hour():
    drink = Drink(102, "Coffee", Decimal("1.99"), Rating.FOUR_STAR)
    assert drink.discount(HAPPY_HOUR) == Decimal("0.20")
    assert drink.discount(MORNING) == 0
    assert drink.discount(datetime(2024, 6, 1, 17, 30)) == 0
    assert drink.discount(datetime(2024, 6, 1, 18, 30)) == 0


def test_food_discount_only_on_best_before_day():
    food = Food(105, "Cookie", Decimal("3.99"), Rating.TWO_STAR, date(2024, 6, 1))
    assert food.discount(MORNING) == Decimal("0.40")
    assert food.discount(HAPPY_HOUR) == Decimal("0.40")
    assert food.discount(datetime(2024, 6, 2, 9, 0)) == 0


@pytest.mark.parametrize("product", [
    Product(100, "Water", Decimal("0.99"), Rating.ONE_STAR),
    Drink(101, "Tea", Decimal("1.99"), Rating.THREE_STAR),
    Food(103, "Cake", Decimal("3.99"), Rating.FIVE_STAR, date(2024, 6, 3)),
])
def test_apply_rating_returns_new_value_of_same_kind(product):
    original_rating = product.rating
    rated = product.apply_rating(Rating.TWO_STAR)

    assert rated is not product
    assert type(rated) is type(product)
    assert rated.rating is Rating.TWO_STAR
    assert (rated.id, rated.name, rated.price) == (product.id, product.name, product.price)
    assert product.rating is original_rating


def test_food_apply_rating_keeps_best_before_and_display():
    cake = Food(103, "Cake", Decimal("3.99"), Rating.FIVE_STAR, date(2024, 6, 3))
    rated = cake.apply_rating(Rating.NOT_RATED)
    assert rated.best_before == date(2024, 6, 3)
    assert str(rated).endswith(", 2024-06-03")


def test_equality_requires_same_kind():
    drink = Drink(104, "Chocolate", Decimal("2.99"), Rating.FOUR_STAR)
    food = Food(104, "Chocolate", Decimal("2.99"), Rating.FIVE_STAR, date(2024, 6, 3))
    assert drink != food
    assert food != drink


def test_equality_ignores_price_rating_and_best_before():
    a = Food(104, "Chocolate", Decimal("2.99"), Rating.FIVE_STAR, date(2024, 6, 3))
    b = Food(104, "Chocolate", Decimal("4.50"), Rating.ONE_STAR, date(2025, 1, 1))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_equality_needs_matching_id_and_name():
    tea = Drink(101, "Tea", Decimal("1.99"))
    assert tea != Drink(101, "Green Tea", Decimal("1.99"))
    assert tea != Drink(102, "Tea", Decimal("1.99"))
    assert tea != None  # noqa: E711
    assert tea != "Tea"


def test_hash_uses_id_only():
    tea = Drink(101, "Tea", Decimal("1.99"))
    green = Drink(101, "Green Tea", Decimal("1.99"))
    assert hash(tea) == hash(green) == 41 * 7 + 101
    assert tea != green
    assert len({tea, green}) == 2


def test_display_form():
    product = Product(101, "Tea", Decimal("1.99"), Rating.THREE_STAR)
    assert str(product) == "101, Tea, 1.99, 0.20, ★★★☆☆"


def test_future_cake_scenario():
    best_before = date.today() + timedelta(days=2)
    cake = Food(103, "Cake", Decimal("3.99"), Rating.FIVE_STAR, best_before)

    assert cake.discount() == 0
    assert str(cake).endswith(best_before.isoformat())
    assert str(cake).startswith("103, Cake, 3.99, 0.00, ★★★★★")
