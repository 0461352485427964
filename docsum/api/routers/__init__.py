"""API routers."""

from docsum.api.routers.meta import router as meta_router
from docsum.api.routers.summaries import router as summaries_router

__all__ = ["meta_router", "summaries_router"]
