from .log_controller import router as log_router
from .verified_user_controller import router as verified_user_router
from .health_controller import router as health_router


__all__ = ["log_router", "verified_user_router", "health_router"]
