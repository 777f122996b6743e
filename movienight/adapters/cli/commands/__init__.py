"""
Commandes CLI de MovieNight.

Reexporte les commandes Typer montees par movienight.main.
"""

from movienight.adapters.cli.commands.catalog_commands import catalog
from movienight.adapters.cli.commands.recommend_commands import (
    prompt_preferences,
    recommend,
)

__all__ = [
    "catalog",
    "prompt_preferences",
    "recommend",
]
