"""
HTTP routes and response models.
"""

from hcomp_app.api.routes import router

__all__ = ["router"]
