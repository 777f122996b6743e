"""
Objet valeur pour les criteres de recommandation.

Une requete est construite pour chaque demande puis abandonnee.
Elle utilise @dataclass(frozen=True) pour garantir l'immutabilite.
"""

from dataclasses import dataclass
from typing import Optional

from movienight.utils.constants import DEFAULT_MAX_RESULTS


@dataclass(frozen=True)
class RecommendationQuery:
    """
    Criteres d'une demande de recommandation.

    Un critere absent ne restreint rien : ensemble de classifications vide,
    duree a None, humeur a None.

    Attributs :
        allowed_ratings : Classifications acceptees (vide = toutes)
        max_duration : Duree maximale en minutes, bornes incluses
        mood : Tag d'humeur en minuscules
        max_results : Nombre maximal de films retournes
    """

    allowed_ratings: frozenset[str] = frozenset()
    max_duration: Optional[int] = None
    mood: Optional[str] = None
    max_results: int = DEFAULT_MAX_RESULTS

    @property
    def is_unrestricted(self) -> bool:
        """Retourne True si aucun critere de filtrage n'est defini."""
        return (
            not self.allowed_ratings
            and self.max_duration is None
            and not (self.mood and self.mood.strip())
        )
