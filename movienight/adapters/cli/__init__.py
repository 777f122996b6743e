"""
Interface en ligne de commande de MovieNight (Typer + Rich).

- preferences : Conversion des saisies utilisateur en RecommendationQuery
- display : Rendu Rich des recommandations et du catalogue
- commands/ : Commandes Typer (recommend, catalog)
"""
