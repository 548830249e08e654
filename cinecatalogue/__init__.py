"""CineCatalogue - catalogue de films enrichi par TMDB et Open-Meteo."""

__version__ = "0.1.0"
