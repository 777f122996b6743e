"""
Utilitaires partages pour les commandes CLI de MovieNight.

Ce module fournit :
- console : instance Rich Console partagee
- state : options de verbosite globales
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- load_catalog : recuperation du catalogue avec sortie propre si invalide
"""

from contextlib import contextmanager
from functools import wraps
from typing import TYPE_CHECKING

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from movienight.container import Container
from movienight.core.exceptions import ValidationError

if TYPE_CHECKING:
    from movienight.adapters.catalog import InMemoryCatalog


# Console globale pour tous les affichages
console = Console()

# Etat global pour les options de verbosite (renseigne par le callback principal)
state = {"verbose": 0, "quiet": False}


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("movienight")
    try:
        yield
    finally:
        loguru_logger.enable("movienight")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container()
        def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def load_catalog(container) -> "InMemoryCatalog":
    """
    Recupere le catalogue depuis le container.

    Un enregistrement invalide dans le catalogue interrompt la commande
    avec un code de sortie 1.
    """
    try:
        return container.catalog()
    except ValidationError as e:
        console.print(f"[red]Catalogue invalide ({e.field}): {e}[/red]")
        raise typer.Exit(1)
