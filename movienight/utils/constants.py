"""
Constantes globales pour MovieNight.

Ce module contient les constantes utilisees dans l'application:
- Classifications de contenu reconnues
- Nombre de recommandations par defaut
"""

# Classifications de contenu reconnues (sensibles a la casse)
# Ensemble ferme : toute autre valeur est rejetee a la construction d'un Movie
VALID_RATINGS = frozenset({
    "G",
    "PG",
    "PG-13",
    "R",
    "NC-17",
    "NR",
    "TV-MA",
    "TV-14",
    "TV-Y",
    "TV-Y7",
})

# Nombre maximal de recommandations retournees par defaut
DEFAULT_MAX_RESULTS = 5
