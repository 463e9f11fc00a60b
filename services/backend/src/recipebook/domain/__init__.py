"""Domain layer for the recipe book application."""
