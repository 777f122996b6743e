"""
Fixtures pytest partagees pour les tests MovieNight.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue par defaut (The Avengers, Toy Story, Inception, Finding Nemo)
- Service de recommandation
- Settings de test avec chemins temporaires
"""

from pathlib import Path

import pytest

from movienight.adapters.catalog import DEFAULT_CATALOG_RECORDS, build_catalog
from movienight.config import Settings
from movienight.core.entities.movie import Movie
from movienight.services.recommender import RecommenderService


@pytest.fixture
def default_catalog() -> list[Movie]:
    """Catalogue par defaut, dans l'ordre d'origine."""
    return build_catalog(DEFAULT_CATALOG_RECORDS)


@pytest.fixture
def recommender() -> RecommenderService:
    """Service de recommandation (sans etat)."""
    return RecommenderService()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log.
    """
    return Settings(
        default_max_results=5,
        log_level="DEBUG",
        log_file=tmp_path / "test.log",
    )
