"""Interface web (API JSON FastAPI) du catalogue."""
