"""
Interface port pour la source du catalogue.

Les commandes CLI obtiennent les films par cette interface, puis les
transmettent au service de recommandation sous forme d'iterable.
L'adaptateur concret est InMemoryCatalog.
"""

from abc import ABC, abstractmethod

from movienight.core.entities.movie import Movie


class ICatalogSource(ABC):
    """
    Interface d'acces au catalogue de films.

    Le catalogue est en lecture seule : aucune operation ne l'ajoute,
    le modifie ou le supprime pendant l'execution.
    """

    @abstractmethod
    def list_movies(self) -> list[Movie]:
        """Retourne les films du catalogue dans leur ordre d'origine."""
        ...
