"""
movielog - Catalogue de vidéothèque personnelle.

Ce package scanne une vidéothèque de films, extrait les caractéristiques
techniques des conteneurs, associe une note externe à chaque film et maintient
un catalogue CSV incrémental indexé par empreinte de fichier.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (classification, matching, réconciliation)
- adapters/ : Couche adaptateurs (CLI, système de fichiers, parsing, client HTTP)
- infrastructure/ : Persistance du catalogue et calcul d'empreinte
"""
