"""API route package — imports all routers for main.py."""

from app.api.health import router as health_router  # noqa: F401
from app.api.example import router as example_router  # noqa: F401
