"""
Routes module - contains all API route handlers
"""

from .projects import router as projects_router
from .scripts import router as scripts_router

__all__ = [
    "projects_router",
    "scripts_router",
]
