"""Infrastructure layer for the recipe book application."""
