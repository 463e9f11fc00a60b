from recipebook.presentation.api.routers.ping import router as ping_router
from recipebook.presentation.api.routers.users import router as users_router

__all__ = [
    "ping_router",
    "users_router",
]
