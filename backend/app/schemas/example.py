"""Example record schema."""

from pydantic import BaseModel


class ExampleRead(BaseModel):
    name: str
    state: str
