"""
Exceptions du domaine MovieNight.
"""

from typing import Any


class ValidationError(ValueError):
    """
    Levee a la construction d'une entite dont un attribut est invalide.

    Attributs :
        field : Nom de l'attribut rejete (ex: "rating")
        value : Valeur rejetee
    """

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
