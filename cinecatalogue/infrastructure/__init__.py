"""Infrastructure technique (persistance SQLite)."""
