"""
SubMatch - Reconciliation de dossiers d'episodes video et de sous-titres.

Ce package regroupe les videos d'un dossier dans un seul repertoire,
associe chaque sous-titre a sa video par code d'episode (SxxExx),
renomme les sous-titres a l'image de leur video et nettoie
optionnellement les sous-dossiers et fichiers restants.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (scan, deplacement, matching, cleanup)
- adapters/ : Couche infrastructure (systeme de fichiers, archives, CLI)
"""

__version__ = "0.1.0"
