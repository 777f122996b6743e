"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.catalog import DEFAULT_CATALOG_RECORDS, InMemoryCatalog
from .config import Settings
from .services.recommender import RecommenderService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        catalog = container.catalog()
        recommender = container.recommender_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Catalogue en memoire - construit une seule fois, jamais modifie
    catalog = providers.Singleton(
        InMemoryCatalog.from_records,
        records=DEFAULT_CATALOG_RECORDS,
    )

    # Service de recommandation (stateless - Singleton)
    recommender_service = providers.Singleton(RecommenderService)
