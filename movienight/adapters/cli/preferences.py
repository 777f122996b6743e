"""
Conversion des saisies utilisateur en criteres de recommandation.

Les saisies invalides ne sont jamais des erreurs : elles sont traitees
comme un critere absent.
"""

from typing import Optional

from movienight.core.value_objects.query import RecommendationQuery
from movienight.utils.constants import DEFAULT_MAX_RESULTS


def parse_allowed_ratings(raw: Optional[str]) -> frozenset[str]:
    """
    Decoupe une liste de classifications separees par des virgules.

    Chaque element est nettoye et mis en majuscules ; les elements vides
    sont ignores.

    Args:
        raw: Saisie brute (ex: "g, pg,PG-13")

    Returns:
        Ensemble des classifications (vide = aucune restriction).
    """
    if not raw:
        return frozenset()
    return frozenset(
        token.strip().upper() for token in raw.split(",") if token.strip()
    )


def parse_max_duration(raw: Optional[str]) -> Optional[int]:
    """
    Convertit la duree maximale saisie en entier.

    Returns:
        Duree en minutes, ou None si la saisie est vide, non numerique
        ou negative.
    """
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def parse_mood(raw: Optional[str]) -> Optional[str]:
    """Normalise le tag d'humeur en minuscules ; None si vide."""
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower()


def build_query(
    ratings: Optional[str] = None,
    max_duration: Optional[str] = None,
    mood: Optional[str] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> RecommendationQuery:
    """Construit une RecommendationQuery a partir des saisies brutes."""
    return RecommendationQuery(
        allowed_ratings=parse_allowed_ratings(ratings),
        max_duration=parse_max_duration(max_duration),
        mood=parse_mood(mood),
        max_results=max_results,
    )
