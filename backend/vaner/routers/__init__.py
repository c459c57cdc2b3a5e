"""API routers."""
from .share import router as share_router

__all__ = ["share_router"]
