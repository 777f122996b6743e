"""
Point d'entrée CLI de MovieNight.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import catalog, recommend
from .adapters.cli.helpers import state
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_console_level, set_console_level

app = typer.Typer(
    name="movienight",
    help="Recommandation de films pour une soirée cinéma",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """MovieNight - Recommandation de films."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    # Sans option, le niveau configuré au démarrage reste en place
    if quiet or verbose:
        level = resolve_console_level(get_config().log_level, verbose, quiet)
        set_console_level(level)
        logger.debug("Niveau console ajusté", level=level)


app.command()(recommend)
app.command()(catalog)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Recommandations par défaut : {config.default_max_results}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieNight v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # DEBUG : les options -v / -q ne sont appliquées qu'au parsing de la CLI
    logger.debug("Démarrage de MovieNight", version=__version__)

    app()


if __name__ == "__main__":
    main()
