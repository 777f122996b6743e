"""
Interfaces ports definissant les contrats pour les adaptateurs.

Exports :
- ICatalogSource : Acces en lecture au catalogue de films
"""

from movienight.core.ports.catalog import ICatalogSource

__all__ = [
    "ICatalogSource",
]
