"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur
et exceptions du domaine.
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entites metier (Movie)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (RecommendationQuery)
"""
