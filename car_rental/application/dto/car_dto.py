"""
Car DTO
=======

Pydantic models validating car and make requests.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MakeCreateRequest(BaseModel):
    """DTO for creating a make."""
    name: str = Field(..., min_length=1, description="Manufacturer name, e.g. Audi")


class CarCreateRequest(BaseModel):
    """DTO for creating a car."""
    model: str = Field(..., min_length=1, description="Model name, e.g. A5 Coupé")
    make_id: int = Field(..., description="ID of the make building this model")
    price_per_day: float = Field(..., ge=0, description="Price to rent one unit for a day")
    units: int = Field(..., ge=0, description="Number of units the service owns")

    model_config = ConfigDict(
        str_strip_whitespace=True,
        protected_namespaces=(),
        json_schema_extra={
            "example": {"model": "A5 Coupé", "make_id": 3, "price_per_day": 100, "units": 4}
        },
    )


class CarEditRequest(BaseModel):
    """DTO for editing a car. Fields left as None are unchanged."""
    id: int
    model: Optional[str] = Field(None, min_length=1)
    make_id: Optional[int] = None
    price_per_day: Optional[float] = Field(None, ge=0)
    units: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(str_strip_whitespace=True, protected_namespaces=())


class CarListRequest(BaseModel):
    """DTO for the car listing filters."""
    make_id: Optional[int] = None
    make_slug: Optional[str] = None
    make_slugs: Optional[List[str]] = None
    min_price_per_day: Optional[float] = Field(None, ge=0)
    max_price_per_day: Optional[float] = Field(None, ge=0)
