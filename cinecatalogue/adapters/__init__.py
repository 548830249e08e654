"""Adaptateurs : implementations concretes des ports (API externes)."""
