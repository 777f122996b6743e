"""
Catalogue de films en memoire.

Fournit les enregistrements du catalogue par defaut, la construction
d'entites Movie a partir d'enregistrements bruts, et l'adaptateur
InMemoryCatalog implementant ICatalogSource.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from movienight.core.entities.movie import Movie
from movienight.core.exceptions import ValidationError
from movienight.core.ports.catalog import ICatalogSource


# Catalogue par defaut de la soiree cinema
DEFAULT_CATALOG_RECORDS: tuple[dict[str, Any], ...] = (
    {
        "title": "The Avengers",
        "rating": "PG-13",
        "duration_minutes": 143,
        "tags": ["action", "adventure", "exciting"],
        "score": 8.0,
    },
    {
        "title": "Toy Story",
        "rating": "G",
        "duration_minutes": 81,
        "tags": ["family", "funny", "happy"],
        "score": 8.3,
    },
    {
        "title": "Inception",
        "rating": "PG-13",
        "duration_minutes": 148,
        "tags": ["mind-bending", "exciting", "suspenseful"],
        "score": 8.8,
    },
    {
        "title": "Finding Nemo",
        "rating": "G",
        "duration_minutes": 100,
        "tags": ["family", "happy", "emotional"],
        "score": 8.1,
    },
)


def movie_from_record(record: Mapping[str, Any]) -> Movie:
    """
    Construit un Movie a partir d'un enregistrement brut.

    Raises:
        ValidationError: Si un attribut est invalide (classification inconnue...)
        KeyError: Si un champ obligatoire est absent
    """
    return Movie(
        title=record["title"],
        rating=record["rating"],
        duration_minutes=record["duration_minutes"],
        tags=record.get("tags", ()),
        score=record.get("score", 0.0),
    )


def build_catalog(
    records: Iterable[Mapping[str, Any]], skip_invalid: bool = False
) -> list[Movie]:
    """
    Construit le catalogue a partir d'enregistrements bruts.

    Args:
        records: Enregistrements (title, rating, duration_minutes, tags, score)
        skip_invalid: Si True, ignore les enregistrements invalides au lieu
            de propager l'erreur

    Returns:
        Liste des films, dans l'ordre des enregistrements.

    Raises:
        ValidationError: Si un enregistrement est invalide et skip_invalid est False
    """
    movies = []
    for index, record in enumerate(records):
        try:
            movies.append(movie_from_record(record))
        except ValidationError as e:
            if not skip_invalid:
                raise
            logger.warning(
                f"Enregistrement ignore ({e.field})",
                index=index,
                title=record.get("title"),
                error=str(e),
            )

    logger.debug("Catalogue construit", count=len(movies))
    return movies


class InMemoryCatalog(ICatalogSource):
    """
    Catalogue de films en memoire, en lecture seule.

    Les films sont stockes dans un tuple : la structure ne change pas
    apres construction.
    """

    def __init__(self, movies: Iterable[Movie]) -> None:
        self._movies: tuple[Movie, ...] = tuple(movies)

    @classmethod
    def from_records(
        cls, records: Iterable[Mapping[str, Any]], skip_invalid: bool = False
    ) -> "InMemoryCatalog":
        """Construit le catalogue a partir d'enregistrements bruts."""
        return cls(build_catalog(records, skip_invalid=skip_invalid))

    def list_movies(self) -> list[Movie]:
        return list(self._movies)

    def all_ratings(self) -> list[str]:
        """Retourne les classifications presentes, triees."""
        return sorted({movie.rating for movie in self._movies})

    def all_tags(self) -> list[str]:
        """Retourne les tags presents, tries."""
        tags: set[str] = set()
        for movie in self._movies:
            tags.update(movie.tags)
        return sorted(tags)

    def __len__(self) -> int:
        return len(self._movies)
