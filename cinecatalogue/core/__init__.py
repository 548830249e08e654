"""Domaine : entites, erreurs et ports (interfaces abstraites)."""
