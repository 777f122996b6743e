"""
Affichage des recommandations et du catalogue avec Rich.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from movienight.core.entities.movie import Movie
from movienight.core.value_objects.query import RecommendationQuery

NO_MATCH_MESSAGE = "No movies match your criteria."

# Separateur des tags dans les lignes de resultat
TAGS_SEPARATOR = ", "


def format_tags(movie: Movie) -> str:
    """Joint les tags tries (l'ensemble n'a pas d'ordre propre)."""
    return TAGS_SEPARATOR.join(sorted(movie.tags))


def format_movie_line(movie: Movie) -> str:
    """
    Formate un film sur une ligne.

    Exemple:
        Toy Story (G, 81 min, Rating Score: 8.3, Tags: family, funny, happy)
    """
    return (
        f"{movie.title} ({movie.rating}, {movie.duration_minutes} min, "
        f"Rating Score: {movie.score:g}, Tags: {format_tags(movie)})"
    )


def display_recommendations(movies: Sequence[Movie], console: Console) -> None:
    """Affiche la liste des recommandations, ou un message si elle est vide."""
    console.print("\n[bold]Recommended Movies:[/bold]")
    if not movies:
        console.print(f"[yellow]{NO_MATCH_MESSAGE}[/yellow]")
        return

    for movie in movies:
        # markup=False : un titre peut contenir des crochets
        console.print(
            format_movie_line(movie), markup=False, highlight=False, soft_wrap=True
        )


def render_query_panel(query: RecommendationQuery) -> Panel:
    """Cree un panel Rich resumant les criteres appliques."""
    lines = []
    if query.is_unrestricted:
        lines.append("[dim]Aucun filtre[/dim]")
    else:
        if query.allowed_ratings:
            lines.append(f"Classifications: {', '.join(sorted(query.allowed_ratings))}")
        if query.max_duration is not None:
            lines.append(f"Duree max: {query.max_duration} min")
        if query.mood:
            lines.append(f"Humeur: {query.mood}")
    lines.append(f"Resultats max: {query.max_results}")

    return Panel("\n".join(lines), title="Criteres", border_style="blue")


def render_catalog_table(movies: Sequence[Movie]) -> Table:
    """Cree une table Rich listant le catalogue."""
    table = Table(title="Catalogue")
    table.add_column("Titre", style="bold")
    table.add_column("Classification")
    table.add_column("Duree", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Tags")

    for movie in movies:
        table.add_row(
            movie.title,
            movie.rating,
            f"{movie.duration_minutes} min",
            f"{movie.score:.1f}",
            format_tags(movie),
        )
    return table
