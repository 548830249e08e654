"""
Entites metier du catalogue.

Exports:
- Movie: Film du catalogue local
"""

from cinecatalogue.core.entities.media import Movie

__all__ = ["Movie"]
