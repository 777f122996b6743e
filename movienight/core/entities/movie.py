"""
Movie catalog entity.

Immutable movie record with validated attributes, used as the unit of
filtering and ranking by the recommender.
"""

from collections.abc import Collection, Iterable
from dataclasses import dataclass, replace
from typing import Optional

from movienight.core.exceptions import ValidationError
from movienight.utils.constants import VALID_RATINGS


@dataclass(frozen=True)
class Movie:
    """
    Movie available in the catalog.

    Built once when the catalog is assembled and never mutated afterwards.
    Any "modification" (see with_tags) returns a new instance.

    Attributes:
        title: Display title (not guaranteed unique)
        rating: Content rating code, one of VALID_RATINGS
        duration_minutes: Runtime in minutes
        tags: Lowercase descriptive labels (mood, genre)
        score: Ranking weight, higher is better
    """

    title: str
    rating: str
    duration_minutes: int
    tags: frozenset[str] = frozenset()
    score: float = 0.0

    def __post_init__(self) -> None:
        if self.rating not in VALID_RATINGS:
            raise ValidationError("rating", self.rating, f"Invalid rating: {self.rating}")
        if not self.title or not self.title.strip():
            raise ValidationError("title", self.title, "Title must not be empty")
        if self.duration_minutes < 0:
            raise ValidationError(
                "duration_minutes",
                self.duration_minutes,
                f"Invalid duration: {self.duration_minutes}",
            )

        if isinstance(self.tags, str):
            raise ValidationError(
                "tags", self.tags, "Tags must be a collection of strings, not a string"
            )

        # frozen=True : normalisation via object.__setattr__
        object.__setattr__(self, "tags", _lowercase(self.tags))
        object.__setattr__(self, "score", float(self.score))

    def matches_preferences(
        self,
        max_duration: Optional[int] = None,
        allowed_ratings: Optional[Collection[str]] = None,
        mood: Optional[str] = None,
    ) -> bool:
        """
        Check the movie against the three hard constraints.

        An absent criterion (None, empty collection, blank mood) does not
        restrict anything.

        Args:
            max_duration: Maximum runtime in minutes (inclusive)
            allowed_ratings: Accepted rating codes
            mood: Tag the movie must carry (case-insensitive)

        Returns:
            True if every present criterion is satisfied.
        """
        if max_duration is not None and self.duration_minutes > max_duration:
            return False

        if allowed_ratings and self.rating not in allowed_ratings:
            return False

        if mood and mood.strip() and mood.lower() not in self.tags:
            return False

        return True

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        return tag.lower() in self.tags

    def with_tags(self, *tags: str) -> "Movie":
        """Return a copy of the movie carrying the extra tags."""
        return replace(self, tags=self.tags | _lowercase(tags))


def _lowercase(tags: Iterable[str]) -> frozenset[str]:
    return frozenset(tag.lower() for tag in tags)
