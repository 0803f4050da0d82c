from pydantic import BaseModel, Field
from typing import Optional


class Coordinates(BaseModel):
    lat: float
    lng: float
    # Name of the pattern that produced the match; never serialized.
    source: str = Field(default="", exclude=True)


class ResolveResponse(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None
    name: Optional[str] = None
    description: Optional[str] = None
    full_address: Optional[str] = None
    image: Optional[str] = None
    rating: Optional[str] = None
    category: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
