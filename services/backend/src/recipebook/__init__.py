"""Recipe Book - account management backend for a recipe-sharing site.

The core recipe domain is only represented by the recipe catalog used for
profile counts. Identity concerns live in recipebook_identity, credential
storage in recipebook_auth.
"""
