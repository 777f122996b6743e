"""
MovieNight - Recommandation de films pour une soiree cinema.

Ce package filtre un petit catalogue de films en memoire selon des
contraintes strictes (classification, duree, humeur) et classe les
films retenus par score.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (recommandation)
- adapters/ : Couche infrastructure (catalogue, CLI)
"""

__version__ = "0.1.0"
