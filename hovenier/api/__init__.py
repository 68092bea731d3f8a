from .leerfeedback import router as leerfeedback_router
from .offertes import router as offertes_router
from .projecten import router as projecten_router

__all__ = ["leerfeedback_router", "offertes_router", "projecten_router"]
