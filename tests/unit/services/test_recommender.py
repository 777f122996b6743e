"""
Tests unitaires pour RecommenderService.

Couvre le pipeline filtrage -> tri -> troncature, les scenarios
du catalogue par defaut et les proprietes de tri et de limite.
"""

import pytest

from movienight.core.entities.movie import Movie
from movienight.core.value_objects import RecommendationQuery
from movienight.services.recommender import (
    RecommenderService,
    filter_movies,
    rank_key,
    rank_movies,
)


def _titles(movies: list[Movie]) -> list[str]:
    return [movie.title for movie in movies]


# ====================
# Fixtures
# ====================

@pytest.fixture
def tied_catalog() -> list[Movie]:
    """Catalogue avec egalites de score et de duree."""
    return [
        Movie("Zeta", "PG", 100, ["happy"], 7.0),
        Movie("Alpha", "PG", 100, ["happy"], 7.0),
        Movie("Short", "PG", 90, ["happy"], 7.0),
        Movie("Best", "R", 120, ["dark"], 9.0),
        Movie("Mid", "G", 80, ["happy"], 7.5),
    ]


# ====================
# Scenarios du catalogue par defaut
# ====================

class TestDefaultCatalogScenarios:
    """Scenarios de reference sur le catalogue par defaut."""

    def test_family_ratings_under_150(self, recommender, default_catalog):
        """G/PG/PG-13 et 150 min : tri par score decroissant."""
        result = recommender.get_recommendations(
            default_catalog, {"G", "PG", "PG-13"}, 150, None
        )
        assert _titles(result) == ["Inception", "Toy Story", "Finding Nemo", "The Avengers"]

    def test_family_mood(self, recommender, default_catalog):
        """Humeur 'family' : seuls Toy Story et Finding Nemo."""
        result = recommender.get_recommendations(
            default_catalog, {"G", "PG", "PG-13"}, 150, "family"
        )
        assert _titles(result) == ["Toy Story", "Finding Nemo"]

    def test_max_duration_90(self, recommender, default_catalog):
        """90 min maximum : seul Toy Story (81 min)."""
        result = recommender.get_recommendations(default_catalog, None, 90, None)
        assert _titles(result) == ["Toy Story"]

    def test_r_rating_only(self, recommender, default_catalog):
        """Aucun film classe R : resultat vide."""
        result = recommender.get_recommendations(default_catalog, {"R"}, None, None)
        assert result == []

    def test_single_result(self, recommender, default_catalog):
        """max_results=1 sans filtre : Inception (meilleur score)."""
        result = recommender.get_recommendations(
            default_catalog, None, None, None, max_results=1
        )
        assert _titles(result) == ["Inception"]

    def test_mood_is_case_insensitive(self, recommender, default_catalog):
        """L'humeur saisie en majuscules correspond aux tags."""
        result = recommender.get_recommendations(default_catalog, None, None, "EXCITING")
        assert _titles(result) == ["Inception", "The Avengers"]


# ====================
# Tri
# ====================

class TestRanking:
    """Tests du tri score decroissant puis duree croissante."""

    def test_rank_key(self):
        """La cle combine score negatif et duree."""
        assert rank_key(Movie("A", "G", 95, [], 8.5)) == (-8.5, 95)

    def test_equal_scores_sorted_by_duration(self, tied_catalog):
        """A score egal, le film le plus court passe en premier."""
        ranked = rank_movies(tied_catalog)
        assert _titles(ranked)[2:] == ["Short", "Zeta", "Alpha"]

    def test_stable_on_full_tie(self, tied_catalog):
        """Score et duree egaux : l'ordre du catalogue est conserve (pas de tri par titre)."""
        ranked = rank_movies(tied_catalog)
        assert _titles(ranked).index("Zeta") < _titles(ranked).index("Alpha")

        reversed_ranked = rank_movies(list(reversed(tied_catalog)))
        assert _titles(reversed_ranked).index("Alpha") < _titles(reversed_ranked).index("Zeta")

    def test_full_order(self, tied_catalog):
        """Ordre complet du catalogue avec egalites."""
        assert _titles(rank_movies(tied_catalog)) == ["Best", "Mid", "Short", "Zeta", "Alpha"]

    def test_result_pairs_respect_order(self, recommender, tied_catalog):
        """Pour toute paire consecutive : score superieur, ou score egal et duree <=."""
        result = recommender.get_recommendations(tied_catalog, max_results=10)
        for a, b in zip(result, result[1:]):
            assert a.score > b.score or (
                a.score == b.score and a.duration_minutes <= b.duration_minutes
            )


# ====================
# Filtrage et limite
# ====================

class TestFilteringAndLimit:
    """Tests du filtrage et de la troncature."""

    def test_filter_preserves_catalog_order(self, default_catalog):
        """Le filtrage conserve l'ordre d'origine."""
        filtered = filter_movies(default_catalog, {"G"})
        assert _titles(filtered) == ["Toy Story", "Finding Nemo"]

    def test_filter_without_criteria_keeps_all(self, default_catalog):
        """Sans critere, tous les films sont conserves."""
        assert filter_movies(default_catalog) == default_catalog

    def test_default_limit_is_five(self, recommender):
        """Sans max_results, au plus 5 films sont retournes."""
        catalog = [Movie(f"Movie {i}", "G", 90 + i, [], float(i)) for i in range(8)]
        result = recommender.get_recommendations(catalog)
        assert len(result) == 5
        assert _titles(result) == ["Movie 7", "Movie 6", "Movie 5", "Movie 4", "Movie 3"]

    def test_fewer_matches_than_limit(self, recommender, default_catalog):
        """Moins de films que la limite : tous sont retournes."""
        result = recommender.get_recommendations(default_catalog, {"G"}, max_results=10)
        assert len(result) == 2

    @pytest.mark.parametrize("max_results", [0, -1, -10])
    def test_non_positive_limit_returns_empty(self, recommender, default_catalog, max_results):
        """max_results <= 0 : resultat vide, sans erreur."""
        assert recommender.get_recommendations(default_catalog, max_results=max_results) == []

    @pytest.mark.parametrize("max_results", [1, 2, 3, 4, 5])
    def test_result_is_prefix_of_full_ranking(self, recommender, default_catalog, max_results):
        """Le resultat est un prefixe du classement complet."""
        full = recommender.get_recommendations(default_catalog, max_results=len(default_catalog))
        result = recommender.get_recommendations(default_catalog, max_results=max_results)
        assert len(result) <= max_results
        assert result == full[: len(result)]

    def test_empty_catalog(self, recommender):
        """Un catalogue vide donne un resultat vide."""
        assert recommender.get_recommendations([], {"G"}, 90, "happy") == []

    def test_accepts_generator_catalog(self, recommender, default_catalog):
        """Le catalogue peut etre un iterable quelconque."""
        result = recommender.get_recommendations(iter(default_catalog), max_results=2)
        assert _titles(result) == ["Inception", "Toy Story"]


# ====================
# Absence d'effets de bord
# ====================

class TestPurity:
    """Tests d'idempotence et de non-modification du catalogue."""

    def test_idempotent(self, recommender, default_catalog):
        """Deux appels identiques donnent le meme resultat."""
        first = recommender.get_recommendations(default_catalog, {"G", "PG-13"}, 150, "happy")
        second = recommender.get_recommendations(default_catalog, {"G", "PG-13"}, 150, "happy")
        assert first == second

    def test_catalog_not_mutated(self, recommender, default_catalog):
        """Le catalogue n'est ni trie ni modifie."""
        snapshot = list(default_catalog)
        recommender.get_recommendations(default_catalog, max_results=1)
        assert default_catalog == snapshot

    def test_returns_new_list(self, recommender, default_catalog):
        """Le resultat est une nouvelle liste."""
        result = recommender.get_recommendations(default_catalog, max_results=10)
        assert result is not default_catalog


# ====================
# recommend (RecommendationQuery)
# ====================

class TestRecommendWithQuery:
    """Tests de l'entree recommend avec une RecommendationQuery."""

    def test_query_equivalent_to_arguments(self, recommender, default_catalog):
        """recommend equivaut a get_recommendations avec les memes criteres."""
        query = RecommendationQuery(
            allowed_ratings=frozenset({"G", "PG", "PG-13"}),
            max_duration=150,
            mood="family",
            max_results=1,
        )
        assert recommender.recommend(default_catalog, query) == recommender.get_recommendations(
            default_catalog, {"G", "PG", "PG-13"}, 150, "family", 1
        )
        assert _titles(recommender.recommend(default_catalog, query)) == ["Toy Story"]

    def test_default_query(self, recommender, default_catalog):
        """Une requete par defaut classe tout le catalogue."""
        result = recommender.recommend(default_catalog, RecommendationQuery())
        assert _titles(result) == ["Inception", "Toy Story", "Finding Nemo", "The Avengers"]

    def test_service_is_stateless(self, default_catalog):
        """Deux instances donnent le meme resultat."""
        query = RecommendationQuery(max_duration=100)
        assert RecommenderService().recommend(default_catalog, query) == RecommenderService().recommend(
            default_catalog, query
        )
