"""
Configuration du logging de MovieNight via loguru.

Deux sorties :
- Console (stderr) : colorée, dont le niveau suit les options -v / -q de la CLI
- Fichier : sérialisé en JSON, avec rotation, toujours au niveau DEBUG

Le handler console est remplaçable à chaud : le callback Typer ne connaît
la verbosité qu'après le démarrage, une fois le logging déjà configuré.
"""

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant loguru du handler console courant
_console_handler_id: Optional[int] = None


def resolve_console_level(log_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Détermine le niveau console à partir de la configuration et des options CLI.

    -q l'emporte sur -v : seules les erreurs restent affichées.
    -v affiche le DEBUG, -vv le TRACE.

    Args :
        log_level : Niveau configuré (Settings.log_level)
        verbose : Nombre d'options -v
        quiet : Option -q
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return log_level


def set_console_level(level: str, sink: Any = None) -> None:
    """
    Remplace le handler console par un handler au niveau donné.

    Args :
        level : Niveau minimum affiché (DEBUG, INFO, ERROR...)
        sink : Destination des logs, stderr par défaut
    """
    global _console_handler_id

    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            # Déjà retiré par un logger.remove() global
            pass

    _console_handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=sink is None,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/movienight.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    verbose: int = 0,
    quiet: bool = False,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau console configuré, ajusté par verbose / quiet
        log_file : Chemin vers le fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
        verbose : Nombre d'options -v
        quiet : Option -q (erreurs uniquement sur la console)
    """
    global _console_handler_id

    # Supprime tous les handlers, dont celui par défaut de loguru
    logger.remove()
    _console_handler_id = None

    set_console_level(resolve_console_level(log_level, verbose, quiet))

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
