"""
Service de calcul d'empreinte CRC-32C a partir des attributs fichier.

Ce service calcule l'identite stable d'un fichier video sans lire son contenu.

Algorithme :
    1. Additionne la date de modification (nanosecondes depuis l'epoch)
       et la taille en octets dans un entier de 128 bits
    2. Calcule le CRC-32C (polynome de Castagnoli) des 16 octets
       little-endian de cet entier
    3. Rend le resultat en hexadecimal minuscule sur 8 caracteres

Un simple renommage ne change ni la taille ni la date de modification :
l'enregistrement du catalogue est reutilise sans relire le conteneur.
Un reencodage ou un remplacement du fichier change l'empreinte.
"""

import crc32c

from src.core.entities.movie import MediaFile

# Largeur de l'entier combine (u128)
FINGERPRINT_INT_BYTES = 16

# Unites successives de la taille lisible, la derniere est la butee
SIZE_UNITS = ("B", "KB", "MB", "GB")


def compute_fingerprint(size_bytes: int, mtime_ns: int) -> str:
    """
    Calcule l'empreinte d'un fichier depuis sa taille et sa date de modification.

    Args :
        size_bytes : Taille du fichier en octets
        mtime_ns : Date de modification en nanosecondes depuis l'epoch

    Retourne :
        CRC-32C hexadecimal de 8 caracteres
    """
    combined = (mtime_ns + size_bytes) % (1 << (8 * FINGERPRINT_INT_BYTES))
    digest = crc32c.crc32c(combined.to_bytes(FINGERPRINT_INT_BYTES, "little"))
    return f"{digest:08x}"


def human_readable_size(size_bytes: int) -> float:
    """
    Convertit une taille en octets vers une valeur lisible.

    Divise par 1024 tant que la valeur depasse 1024, sans aller au-dela
    du gigaoctet, puis arrondit a 2 decimales. L'unite n'est pas retournee :
    le catalogue stocke la valeur seule.
    """
    value = float(size_bytes)
    for _unit in SIZE_UNITS[:-1]:
        if value < 1024:
            break
        value /= 1024
    return round(value, 2)


def fingerprint_media(media_file: MediaFile) -> tuple[float, str]:
    """
    Calcule la taille lisible et l'empreinte d'un fichier deja scanne.

    Args :
        media_file : Attributs lus par le scanner (taille, date de modification)

    Retourne :
        (taille lisible, empreinte)
    """
    return (
        human_readable_size(media_file.size_bytes),
        compute_fingerprint(media_file.size_bytes, media_file.mtime_ns),
    )
