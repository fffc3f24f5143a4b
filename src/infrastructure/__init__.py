"""
Couche infrastructure de movielog.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports). Il gere les preoccupations techniques :

- persistence/ : Empreinte des fichiers et stockage CSV du catalogue

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer le format de stockage sans modifier la logique metier.
"""
