"""
Module de persistance SQLite du catalogue.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy) :

- database.py : Creation de l'engine SQLite, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees

Usage:
    engine = create_db_engine("sqlite:///catalogue.db")
    init_db(engine)
    session = Session(engine)
"""

from cinecatalogue.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from cinecatalogue.infrastructure.persistence.models import MovieModel

__all__ = [
    "create_db_engine",
    "init_db",
    "MovieModel",
]
