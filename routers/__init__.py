"""
API Routers Package
"""

from .reviews import router as reviews_router
from .strength import router as strength_router

__all__ = ['reviews_router', 'strength_router']
