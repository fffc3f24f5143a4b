"""
Adaptateurs de parsing pour movielog.

Ce package contient les implementations concretes des interfaces de parsing:
- ReleaseNameParser: Extrait titre, annee, encodeur et remux d'un nom de release
- MediaInfoTrackReader: Lit les pistes d'un conteneur avec pymediainfo
"""
