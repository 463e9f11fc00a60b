"""Persistence implementations for recipebook_identity."""
