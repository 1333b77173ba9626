"""
Domain entities for the baseline simulation.
"""
from typing import Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .constants import COUNT_MIN, COUNT_MAX, LatLng

class Cell(BaseModel):
    """
    One square of the spatial mesh with its per-slot people counts.
    """
    id: str = Field(..., description="Stable identifier M-{row}-{col}")
    row: int = Field(..., ge=0, description="Grid row (south to north)")
    col: int = Field(..., ge=0, description="Grid column (west to east)")
    polygon: Tuple[LatLng, LatLng, LatLng, LatLng] = Field(..., description="Corner (lat, lng) pairs")
    center: LatLng = Field(..., description="Centroid (lat, lng)")
    counts: Tuple[int, ...] = Field(..., description="Baseline people count per time slot")
    is_core: bool = Field(False, description="Within the inner distance cutoff")
    is_edge: bool = Field(False, description="Beyond the outer distance cutoff")
    label: str = Field(..., description="Zone classification tag")

    model_config = ConfigDict(frozen=True)

    @field_validator('counts')
    def counts_within_bounds(cls, v):
        for count in v:
            if not COUNT_MIN <= count <= COUNT_MAX:
                raise ValueError(f'counts must lie in [{COUNT_MIN}, {COUNT_MAX}], got {count}')
        return v

    @property
    def is_ring(self) -> bool:
        return not (self.is_core or self.is_edge)


class ParkingLot(BaseModel):
    """
    A parking lot with per-slot occupancy and price series.
    """
    id: str = Field(..., description="Stable identifier P-NN")
    name: str = Field(..., description="Display name")
    position: LatLng = Field(..., description="Location (lat, lng)")
    offset: LatLng = Field(..., description="Offset from the district center in degrees")
    capacity: int = Field(..., gt=0, description="Number of spaces")
    base_price: int = Field(..., gt=0, description="Price before surge and lunch uplift")
    occupancy: Tuple[float, ...] = Field(..., description="Occupied fraction per time slot")
    price: Tuple[int, ...] = Field(..., description="Price per time slot in yen")
    is_core: bool = Field(False, description="Within the core radius of the district center")

    model_config = ConfigDict(frozen=True)

    @field_validator('occupancy')
    def occupancy_within_bounds(cls, v):
        for value in v:
            if not 0.10 <= value <= 0.98:
                raise ValueError(f'occupancy must lie in [0.10, 0.98], got {value}')
        return v

    @field_validator('price')
    def price_must_be_positive(cls, v):
        if any(value <= 0 for value in v):
            raise ValueError('price must be positive')
        return v
