"""Pydantic schemas — re‑exported for convenience."""

from app.schemas.common import ErrorResponse, HealthRead  # noqa: F401
from app.schemas.example import ExampleRead  # noqa: F401
