"""
Scenario transforms: map baseline mesh counts and parking entries to what-if
values. Unknown or null scenario ids leave the input unchanged.
"""
import math
from typing import Optional

from ..common.utils import check_time_index, clamp, round_half_up
from ..simulation.domain import Cell, ParkingLot
from .domain import ParkingValue, ScenarioContext, ScenarioId
from .geo import haversine_km

OCCUPANCY_FLOOR = 0.10
OCCUPANCY_CEILING = 0.98

# (min distance to a hotspot in km, price factor, occupancy factor)
BALANCE_DISTANCE_BANDS = (
    (0.45, 1.22, 0.9),
    (0.95, 0.88, 1.05),
)
BALANCE_FAR = (0.96, 1.02)


def transform_mesh_count(count: int, cell: Cell, scenario_id: Optional[str]) -> int:
    scenario = ScenarioId.parse(scenario_id)
    if scenario is None:
        return count

    if scenario is ScenarioId.PEAK:
        if count >= 120:
            return round_half_up(count * 0.72)
        if count >= 80:
            return round_half_up(count * 0.82)
        return round_half_up(count * 0.93)

    if scenario is ScenarioId.DEMAND:
        if count >= 110:
            return round_half_up(count * 0.8)
        if count < 60:
            return round_half_up(count * 1.1)
        return round_half_up(count * 0.92)

    # balance
    if cell.is_core:
        return round_half_up(count * 0.68)
    if cell.is_edge:
        return round_half_up(count * 1.15)
    return round_half_up(count * 1.05)


def peak_price_multiplier(time_index: float, slot_count: int) -> float:
    """
    Midday premium with a softer morning rate, in [0.85, 1.28].
    """
    if not math.isfinite(time_index) or slot_count <= 1:
        return 1.0
    t = time_index / (slot_count - 1)
    peak = math.exp(-(((t - 0.55) / 0.18) ** 2))
    morning_dip = math.exp(-(((t - 0.12) / 0.14) ** 2))
    return clamp(0.96 + 0.28 * peak - 0.12 * morning_dip, 0.85, 1.28)


def demand_pressure(occupancy: float) -> float:
    return clamp((occupancy - 0.55) / 0.35, -1, 1)


def demand_price_multiplier(occupancy: float) -> float:
    return 1 + demand_pressure(occupancy) * 0.3


def nearest_hotspot_km(lot: ParkingLot, context: ScenarioContext) -> float:
    return min(haversine_km(lot.position, hotspot.center) for hotspot in context.hotspots)


def transform_parking(
    lot: ParkingLot,
    time_index: int,
    scenario_id: Optional[str],
    context: Optional[ScenarioContext] = None
) -> ParkingValue:
    """
    Applies the scenario to one lot at one slot.

    Occupancy is always clamped to [0.10, 0.98]; price is rounded but never
    bounded. Raises InvalidTimeIndexError unless 0 <= time_index < len(series).
    """
    check_time_index(time_index, len(lot.occupancy))
    occupancy = lot.occupancy[time_index]
    price = lot.price[time_index]

    if not scenario_id:
        return ParkingValue(occupancy=occupancy, price=price)

    scenario = ScenarioId.parse(scenario_id)

    if scenario is ScenarioId.PEAK:
        multiplier = peak_price_multiplier(time_index, len(lot.occupancy))
        price *= multiplier
        occupancy_shift = (multiplier - 1) * 0.35
        occupancy = clamp(occupancy * (1 - occupancy_shift), OCCUPANCY_FLOOR, OCCUPANCY_CEILING)

    elif scenario is ScenarioId.DEMAND:
        pressure = demand_pressure(occupancy)
        price *= demand_price_multiplier(occupancy)
        occupancy = clamp(occupancy - pressure * 0.06, OCCUPANCY_FLOOR, OCCUPANCY_CEILING)

    elif scenario is ScenarioId.BALANCE:
        if context is not None and context.hotspots:
            distance = nearest_hotspot_km(lot, context)
            price_factor, occupancy_factor = BALANCE_FAR
            for limit, band_price, band_occupancy in BALANCE_DISTANCE_BANDS:
                if distance <= limit:
                    price_factor, occupancy_factor = band_price, band_occupancy
                    break
            price *= price_factor
            occupancy *= occupancy_factor
        elif lot.is_core:
            occupancy *= 0.8
            price *= 1.25
        else:
            occupancy *= 1.05
            price *= 0.85

    return ParkingValue(
        occupancy=clamp(occupancy, OCCUPANCY_FLOOR, OCCUPANCY_CEILING),
        price=round_half_up(price),
    )
