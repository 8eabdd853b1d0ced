from .columns import router as columns_router
from .directories import router as directories_router

__all__ = ["columns_router", "directories_router"]
