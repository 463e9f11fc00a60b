"""Command-line interface for the recipe book backend."""
