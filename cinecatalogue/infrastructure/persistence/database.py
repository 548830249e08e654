"""
Configuration de la base de donnees SQLite du catalogue.

Ce module fournit :
- Creation de l'engine SQLite (configure pour un usage multi-thread)
- Fonction d'initialisation des tables

L'engine est construit explicitement et injecte par le container DI ;
aucun engine global n'est conserve dans ce module.
"""

from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Cree le repertoire parent si l'URL designe un fichier SQLite. Une base
    en memoire partage une connexion unique (StaticPool) pour rester visible
    de toutes les sessions.

    Args:
        database_url: URL SQLAlchemy (ex: "sqlite:///catalogue.db")
    """
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            db_path = Path(database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=False, connect_args=connect_args, **kwargs)


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Les modeles sont importes ici pour enregistrer leurs metadonnees dans
    SQLModel.metadata avant la creation des tables.

    Returns:
        L'engine initialise
    """
    from cinecatalogue.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
