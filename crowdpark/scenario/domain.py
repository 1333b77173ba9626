"""
Domain entities for the Scenario module.
"""
from enum import Enum
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict

from ..simulation.constants import LatLng
from ..simulation.domain import Cell, ParkingLot

class ScenarioId(str, Enum):
    PEAK = "peak"
    DEMAND = "demand"
    BALANCE = "balance"

    @classmethod
    def parse(cls, value) -> Optional["ScenarioId"]:
        """Returns the matching id, or None for null and unknown values."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class ScenarioCase(BaseModel):
    """
    Static description of a policy intervention.
    """
    id: ScenarioId
    title: str
    pattern: str
    summary: str
    rules: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)


SCENARIO_CASES: Tuple[ScenarioCase, ...] = (
    ScenarioCase(
        id=ScenarioId.PEAK,
        title="Peak Hours Pricing",
        pattern="Midday surge / morning relief",
        summary=(
            "Midday prices climb to cool peak congestion while morning rates "
            "soften to encourage early arrivals."
        ),
        rules=(
            "Midday window (12:15–13:30) runs a premium uplift",
            "Morning window (11:00–11:45) runs a softer rate",
            "Occupancy colors drift to show redistribution",
        ),
    ),
    ScenarioCase(
        id=ScenarioId.DEMAND,
        title="Demand-Based Pricing",
        pattern="Live occupancy response",
        summary=(
            "Prices flex with current occupancy, nudging drivers away from full "
            "lots toward quieter blocks."
        ),
        rules=(
            "High-occupancy lots get a price boost",
            "Low-occupancy lots receive a discount",
            "Changes animate over ~1 second",
        ),
    ),
    ScenarioCase(
        id=ScenarioId.BALANCE,
        title="Area-Based Redistribution",
        pattern="Hotspot buffering",
        summary=(
            "Hotspot-adjacent lots go premium while surrounding areas discount "
            "to pull vehicles outward."
        ),
        rules=(
            "Hotspot-adjacent parking gets a price lift",
            "Surrounding areas receive a lower price band",
            "Outbound arrows visualize redistribution",
        ),
    ),
)


def get_scenario_case(scenario_id) -> Optional[ScenarioCase]:
    parsed = ScenarioId.parse(scenario_id)
    for case in SCENARIO_CASES:
        if case.id == parsed:
            return case
    return None


class SpotAnchor(BaseModel):
    """
    A ranked cell used as a redistribution anchor.
    """
    center: LatLng = Field(..., description="Cell centroid (lat, lng)")
    intensity: int = Field(..., description="Baseline count at the current slot")

    model_config = ConfigDict(frozen=True)


class ScenarioContext(BaseModel):
    """
    Hotspot/lowspot ranking for one render pass.
    """
    hotspots: Tuple[SpotAnchor, ...] = ()
    lowspots: Tuple[SpotAnchor, ...] = ()
    grid_center: Optional[LatLng] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not self.hotspots


EMPTY_CONTEXT = ScenarioContext()


class FlowLine(BaseModel):
    """
    Directional vector between zones, serialised with ``from``/``to`` keys.
    """
    origin: LatLng = Field(..., alias="from")
    destination: LatLng = Field(..., alias="to")
    path: Tuple[LatLng, ...] = Field(..., description="Curved polyline from origin to destination")
    weight: float = Field(..., ge=0.4, le=1.2, description="Normalised magnitude")
    color: str
    label: str
    value: int = Field(..., ge=0, description="Absolute intensity delta")
    trend: Literal['down', 'out']

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ParkingValue(BaseModel):
    occupancy: float = Field(..., ge=0.10, le=0.98)
    price: int

    model_config = ConfigDict(frozen=True)


class MeshDisplayCell(BaseModel):
    """
    A baseline cell with its count at one slot, before and after the scenario.
    """
    cell: Cell
    base_count: int
    count: int

    model_config = ConfigDict(frozen=True)

    @property
    def center(self) -> LatLng:
        return self.cell.center


class ParkingDisplayLot(BaseModel):
    """
    A baseline lot with its occupancy and price at one slot, before and after.
    """
    lot: ParkingLot
    base_occupancy: float
    base_price: int
    occupancy: float
    price: int

    model_config = ConfigDict(frozen=True)


class ImpactStats(BaseModel):
    """
    Before/after aggregates for the reporting collaborator.
    """
    avg_before: int
    avg_after: int
    peak_before: int
    peak_after: int
    occupancy_before: int = Field(..., description="Mean occupancy in percent")
    occupancy_after: int = Field(..., description="Mean occupancy in percent")
    price_before: int
    price_after: int
    peak_drop: int = Field(..., ge=0, description="Peak density reduction in percent")
    high_cells_before: int = Field(0, ge=0, description="Cells in the high mesh band")
    high_cells_after: int = Field(0, ge=0, description="Cells in the high mesh band")
    narrative: str

    model_config = ConfigDict(frozen=True)
