"""
Couche domaine (core).

Contient les entités, ports (interfaces abstraites), objets valeur et erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entités (MediaFile)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (EpisodeCode)
"""
