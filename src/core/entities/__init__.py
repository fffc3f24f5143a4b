"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- MovieRecord: One row of the movie catalog, keyed by its fingerprint
- MediaFile: A video file as seen on disk during a scan
"""

from src.core.entities.movie import MediaFile, MovieRecord

__all__ = [
    "MediaFile",
    "MovieRecord",
]
