"""
Commande CLI d'affichage du catalogue (catalog).
"""

from movienight.adapters.cli.display import render_catalog_table
from movienight.adapters.cli.helpers import console, load_catalog, with_container


def catalog() -> None:
    """Affiche le catalogue de films."""
    _catalog()


@with_container()
def _catalog(container) -> None:
    """Implementation de la commande catalog."""
    movies = load_catalog(container)

    console.print(render_catalog_table(movies.list_movies()))
    console.print(f"\n[bold]Total: {len(movies)} film(s)[/bold]")
