"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- RecommendationQuery : Criteres d'une demande de recommandation
"""

from movienight.core.value_objects.query import RecommendationQuery

__all__ = [
    "RecommendationQuery",
]
