"""
Entites metier representant les concepts centraux du domaine.

Exports:
- Movie: Film du catalogue avec classification, duree, tags et score
"""

from movienight.core.entities.movie import Movie

__all__ = [
    "Movie",
]
