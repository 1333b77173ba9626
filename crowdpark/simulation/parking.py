"""
Parking inventory generator.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..common.exceptions import InvalidTimeSlotsError
from ..common.logging import setup_logger, log_execution_time
from ..common.utils import clamp, round_half_up
from . import constants as C
from .constants import LatLng
from .domain import ParkingLot
from .rng import create, stream_for
from .time_weights import TIME_WEIGHTS

logger = setup_logger(__name__)


@dataclass(frozen=True)
class LotPlacement:
    """Position and static attributes of a lot before its series are derived."""
    id: str
    name: str
    offset: LatLng
    capacity: int
    base_price: int

    @property
    def distance(self) -> float:
        # Undo the longitude stretch so the disk is isotropic again
        return math.hypot(self.offset[0], self.offset[1] / C.PARKING_LNG_STRETCH)


def lot_name(index: int) -> str:
    prefix = C.LOT_NAME_PREFIXES[index % len(C.LOT_NAME_PREFIXES)]
    suffix = C.LOT_NAME_SUFFIXES[(index + 3) % len(C.LOT_NAME_SUFFIXES)]
    return f"{prefix} {suffix}"


def place_lots(count: int, seed: int = C.PARKING_SEED) -> List[LotPlacement]:
    """
    Uniform-disk sampling around the center. Draw order per lot is angle,
    radius, capacity, base price.
    """
    rand = create(seed)
    placements = []
    for i in range(count):
        angle = rand() * math.pi * 2
        radius = math.sqrt(rand()) * C.PARKING_MAX_RADIUS
        lat_offset = math.cos(angle) * radius
        lng_offset = math.sin(angle) * radius * C.PARKING_LNG_STRETCH
        capacity = round_half_up(60 + rand() * 160)
        base_price = round_half_up(220 + rand() * 220)
        placements.append(LotPlacement(
            id=f"P-{i + 1:02d}",
            name=lot_name(i),
            offset=(lat_offset, lng_offset),
            capacity=capacity,
            base_price=base_price,
        ))
    return placements


def occupancy_series(placement: LotPlacement, weights: Sequence[float]) -> List[float]:
    dist_factor = clamp(1 - placement.distance / C.PARKING_DISTANCE_SCALE, 0.25, 1)
    seed = stream_for(placement.id, C.PARKING_STREAM_MULTIPLIER)
    bias = 0.85 + seed() * 0.3
    wave_shift = seed() * math.pi * 2
    base = (0.28 + dist_factor * 0.6) * bias

    occupancy = []
    last = len(weights) - 1
    for index, weight in enumerate(weights):
        t = (index / last) * math.pi * 2
        rhythm = 1 + 0.08 * math.sin(t + wave_shift) + 0.05 * math.cos(t * 1.6 + wave_shift)
        noise = (seed() - 0.5) * 0.12
        occupancy.append(clamp(base * weight * rhythm + noise, C.OCCUPANCY_MIN, C.OCCUPANCY_MAX))
    return occupancy


def price_series(base_price: int, occupancy: Sequence[float]) -> List[int]:
    prices = []
    for index, occ in enumerate(occupancy):
        surge = (occ - 0.45) * C.SURGE_PER_OCCUPANCY
        lunch = C.LUNCH_UPLIFT if index in C.LUNCH_SLOTS else 0
        prices.append(round_half_up(base_price + surge + lunch))
    return prices


@log_execution_time(logger)
def generate_parking_inventory(
    center: LatLng = C.CENTER,
    count: int = C.PARKING_LOT_COUNT,
    weights: Optional[Sequence[float]] = None,
    seed: int = C.PARKING_SEED
) -> List[ParkingLot]:
    """
    Places ``count`` lots around ``center`` and derives their occupancy and
    price series. Lots nearer the center run fuller.
    """
    weights = TIME_WEIGHTS if weights is None else weights
    if len(weights) < 2:
        raise InvalidTimeSlotsError(f"parking inventory needs at least 2 time slots, got {len(weights)}")

    lots = []
    for placement in place_lots(count, seed=seed):
        occupancy = occupancy_series(placement, weights)
        lots.append(ParkingLot(
            id=placement.id,
            name=placement.name,
            position=(center[0] + placement.offset[0], center[1] + placement.offset[1]),
            offset=placement.offset,
            capacity=placement.capacity,
            base_price=placement.base_price,
            occupancy=occupancy,
            price=price_series(placement.base_price, occupancy),
            is_core=placement.distance < C.PARKING_CORE_RADIUS,
        ))

    core = sum(1 for lot in lots if lot.is_core)
    logger.info(f"Generated parking inventory: {len(lots)} lots ({core} core), {len(weights)} slots")
    return lots
