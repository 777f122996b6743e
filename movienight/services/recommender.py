"""
Service de recommandation de films.

Ce module fournit le pipeline de recommandation en trois etapes,
dans cet ordre strict :
1. Filtrage par contraintes strictes (duree, classification, humeur)
2. Tri par score decroissant, puis duree croissante
3. Troncature au nombre maximal de resultats

Le tri est stable : deux films de meme score et de meme duree
conservent leur ordre dans le catalogue. Le titre n'intervient pas.
"""

from collections.abc import Collection, Iterable
from typing import Optional

from loguru import logger

from movienight.core.entities.movie import Movie
from movienight.core.value_objects.query import RecommendationQuery
from movienight.utils.constants import DEFAULT_MAX_RESULTS


def filter_movies(
    catalog: Iterable[Movie],
    allowed_ratings: Optional[Collection[str]] = None,
    max_duration: Optional[int] = None,
    mood: Optional[str] = None,
) -> list[Movie]:
    """
    Conserve les films qui satisfont toutes les contraintes.

    Args:
        catalog: Films a filtrer
        allowed_ratings: Classifications acceptees (None ou vide = toutes)
        max_duration: Duree maximale en minutes (None = pas de limite)
        mood: Tag d'humeur requis (None ou vide = pas de filtre)

    Returns:
        Liste des films retenus, dans l'ordre du catalogue.
    """
    return [
        movie
        for movie in catalog
        if movie.matches_preferences(max_duration, allowed_ratings, mood)
    ]


def rank_key(movie: Movie) -> tuple[float, int]:
    """Cle de tri : score decroissant, puis duree croissante."""
    return (-movie.score, movie.duration_minutes)


def rank_movies(movies: Iterable[Movie]) -> list[Movie]:
    """Trie les films par score decroissant puis duree croissante (tri stable)."""
    return sorted(movies, key=rank_key)


class RecommenderService:
    """
    Service de recommandation sans etat.

    Ne modifie jamais le catalogue recu : chaque appel est independant
    et retourne le meme resultat pour les memes arguments.

    Utilisation :
        service = RecommenderService()
        movies = service.get_recommendations(catalog, {"G", "PG"}, 120, "family")
    """

    def get_recommendations(
        self,
        catalog: Iterable[Movie],
        allowed_ratings: Optional[Collection[str]] = None,
        max_duration: Optional[int] = None,
        mood: Optional[str] = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> list[Movie]:
        """
        Retourne les meilleurs films correspondant aux criteres.

        Args:
            catalog: Films candidats
            allowed_ratings: Classifications acceptees (None ou vide = toutes)
            max_duration: Duree maximale en minutes, bornes incluses
            mood: Tag d'humeur requis, insensible a la casse
            max_results: Nombre maximal de films retournes

        Returns:
            Au plus max_results films, tries. Liste vide si aucun film ne
            correspond ou si max_results <= 0.
        """
        filtered = filter_movies(catalog, allowed_ratings, max_duration, mood)
        ranked = rank_movies(filtered)

        if max_results <= 0:
            return []

        recommendations = ranked[:max_results]
        logger.debug(
            "Recommandations calculees",
            matched=len(filtered),
            returned=len(recommendations),
            max_results=max_results,
        )
        return recommendations

    def recommend(
        self, catalog: Iterable[Movie], query: RecommendationQuery
    ) -> list[Movie]:
        """Applique une RecommendationQuery au catalogue."""
        return self.get_recommendations(
            catalog,
            allowed_ratings=query.allowed_ratings,
            max_duration=query.max_duration,
            mood=query.mood,
            max_results=query.max_results,
        )
