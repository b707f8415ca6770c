# models/rateable.py
from __future__ import annotations
from abc import ABC, abstractmethod

from models.rating import Rating


class Rateable(ABC):
    # Capability shared by anything that carries a rating.
    # Implementations return a new value from apply_rating instead of mutating.

    DEFAULT_RATING = Rating.NOT_RATED

    # overridden by implementations that store their own rating
    rating: Rating = DEFAULT_RATING

    @abstractmethod
    def apply_rating(self, rating: Rating) -> Rateable:
        pass
