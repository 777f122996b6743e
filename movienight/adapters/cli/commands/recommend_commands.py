"""
Commande CLI de recommandation (recommend).
"""

from typing import Annotated, Optional

import typer
from rich.prompt import Prompt

from movienight.adapters.cli.display import display_recommendations, render_query_panel
from movienight.adapters.cli.helpers import (
    console,
    load_catalog,
    state,
    suppress_loguru,
    with_container,
)
from movienight.adapters.cli.preferences import build_query
from movienight.adapters.catalog import InMemoryCatalog


def recommend(
    ratings: Annotated[
        Optional[str],
        typer.Option("--ratings", "-r", help="Classifications acceptees (ex: G,PG,PG-13)"),
    ] = None,
    max_duration: Annotated[
        Optional[str],
        typer.Option("--max-duration", "-d", help="Duree maximale en minutes"),
    ] = None,
    mood: Annotated[
        Optional[str],
        typer.Option("--mood", "-m", help="Tag d'humeur (ex: exciting, funny)"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Nombre maximal de recommandations"),
    ] = None,
    interactive: Annotated[
        Optional[bool],
        typer.Option(
            "--interactive/--no-interactive",
            help="Demande les criteres manquants (defaut: si aucun critere fourni)",
        ),
    ] = None,
) -> None:
    """Recommande des films selon classification, duree et humeur."""
    _recommend(ratings, max_duration, mood, limit, interactive)


@with_container()
def _recommend(
    container,
    ratings: Optional[str],
    max_duration: Optional[str],
    mood: Optional[str],
    limit: Optional[int],
    interactive: Optional[bool],
) -> None:
    """Implementation de la commande recommend."""
    config = container.config()
    catalog = load_catalog(container)

    if interactive is None:
        interactive = ratings is None and max_duration is None and mood is None

    if interactive:
        with suppress_loguru():
            ratings, max_duration, mood = prompt_preferences(
                catalog, ratings, max_duration, mood
            )

    query = build_query(
        ratings,
        max_duration,
        mood,
        max_results=limit if limit is not None else config.default_max_results,
    )
    if state["verbose"]:
        console.print(render_query_panel(query))

    recommender = container.recommender_service()
    recommendations = recommender.recommend(catalog.list_movies(), query)

    with suppress_loguru():
        display_recommendations(recommendations, console)


def prompt_preferences(
    catalog: InMemoryCatalog,
    ratings: Optional[str],
    max_duration: Optional[str],
    mood: Optional[str],
) -> tuple[str, str, str]:
    """
    Demande a l'utilisateur les criteres non fournis en option.

    Returns:
        Tuple (ratings, max_duration, mood) de saisies brutes.
    """
    console.print("[bold]Movie Recommendation System[/bold]")
    console.print("Enter your preferences:")

    if ratings is None:
        console.print(f"[dim]Disponibles: {', '.join(catalog.all_ratings())}[/dim]")
        ratings = Prompt.ask(
            "Allowed ratings (comma separated, e.g. G,PG,PG-13)",
            console=console,
            default="",
            show_default=False,
        )
    if max_duration is None:
        max_duration = Prompt.ask(
            "Maximum duration in minutes (or leave blank)",
            console=console,
            default="",
            show_default=False,
        )
    if mood is None:
        console.print(f"[dim]Disponibles: {', '.join(catalog.all_tags())}[/dim]")
        mood = Prompt.ask(
            "Mood tag (e.g. exciting, funny, emotional)",
            console=console,
            default="",
            show_default=False,
        )

    return ratings, max_duration, mood
