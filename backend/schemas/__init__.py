# Schemas package
from .common import Link, PagedResponse
from .health import HealthResponse

__all__ = [
    "HealthResponse",
    "Link",
    "PagedResponse",
]
