"""Maps tools: service, HTTP router and error types."""

from .errors import InternalError, NotFoundError, ToolError, ValidationError
from .router import router
from .service import MapsToolService

__all__ = [
    "MapsToolService",
    "router",
    "ToolError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
]
