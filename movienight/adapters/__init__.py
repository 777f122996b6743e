"""
Couche infrastructure : implementations concretes des ports.

- catalog : Catalogue en memoire (ICatalogSource)
- cli/ : Interface en ligne de commande (Typer + Rich)
"""
