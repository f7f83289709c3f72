"""
API routes package.
Mobile app backend routes.
"""

from .drive_session_routes import router as drive_session_router
from .preferences_routes import router as preferences_router

__all__ = [
    "drive_session_router",
    "preferences_router"
]
