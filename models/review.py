# models/review.py
from dataclasses import dataclass

from models.rating import Rating
# Review model representing one editable user submission.


@dataclass
class Review:
    rating: Rating
    comments: str
