"""Infrastructure for recipebook_identity."""
