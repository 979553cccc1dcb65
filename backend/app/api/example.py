"""Example route — always answers with the same fixed record."""

from fastapi import APIRouter

from app.schemas.example import ExampleRead

router = APIRouter()

_EXAMPLE = {"name": "John", "state": "TX"}


@router.get("/example", response_model=ExampleRead)
async def get_example():
    """Return the fixed example record; query, headers and body are ignored."""
    return _EXAMPLE
