# models/rating.py
from enum import Enum
# Rating levels from 0 to 5 stars, each bound to its display glyphs.


class Rating(Enum):
    NOT_RATED = "☆☆☆☆☆"
    ONE_STAR = "★☆☆☆☆"
    TWO_STAR = "★★☆☆☆"
    THREE_STAR = "★★★☆☆"
    FOUR_STAR = "★★★★☆"
    FIVE_STAR = "★★★★★"

    @property
    def stars(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_stars(cls, count: int) -> "Rating":
        # 0 -> NOT_RATED ... 5 -> FIVE_STAR, anything else is unrated
        levels = list(cls)
        if 0 <= count < len(levels):
            return levels[count]
        return cls.NOT_RATED
