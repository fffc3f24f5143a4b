"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et
exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(adapters, frameworks, réseau).

Sous-packages :
- entities/ : Entités métier (MovieRecord, MediaFile)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Track, ContainerInfo, ParsedName)
- errors : Hiérarchie d'exceptions CatalogError
"""
