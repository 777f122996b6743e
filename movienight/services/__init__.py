"""
Couche application : cas d'utilisation de MovieNight.

Exports :
- RecommenderService : Pipeline filtrage -> tri -> troncature
"""

from movienight.services.recommender import RecommenderService

__all__ = [
    "RecommenderService",
]
