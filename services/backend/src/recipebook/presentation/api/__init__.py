"""REST API presentation layer for the recipe book accounts.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Failure and error responses
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from recipebook.presentation.api.app import create_app

__all__ = ["create_app"]
