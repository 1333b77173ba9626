"""
Immutable baseline universe: mesh, parking and the timeline they share.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from omegaconf import DictConfig

from ..common.logging import setup_logger
from . import constants as C
from .constants import LatLng
from .domain import Cell, ParkingLot
from .mesh import generate_mesh_field
from .parking import generate_parking_inventory
from .time_weights import time_slot_labels, time_weights

logger = setup_logger(__name__)


@dataclass(frozen=True)
class BaselineUniverse:
    center: LatLng
    time_slots: Tuple[str, ...]
    weights: Tuple[float, ...]
    cells: Tuple[Cell, ...]
    lots: Tuple[ParkingLot, ...]

    @property
    def slot_count(self) -> int:
        return len(self.time_slots)


def build_universe(
    center: LatLng = C.CENTER,
    rows: int = C.MESH_ROWS,
    cols: int = C.MESH_COLS,
    size_meters: float = C.CELL_SIZE_METERS,
    lot_count: int = C.PARKING_LOT_COUNT,
    time_slots: Optional[Tuple[str, ...]] = None,
    hotspot_seed: int = C.HOTSPOT_SEED,
    parking_seed: int = C.PARKING_SEED
) -> BaselineUniverse:
    time_slots = time_slot_labels() if time_slots is None else tuple(time_slots)
    weights = tuple(time_weights(len(time_slots)))
    cells = generate_mesh_field(center, rows, cols, size_meters, weights, hotspot_seed)
    lots = generate_parking_inventory(center, lot_count, weights, parking_seed)
    return BaselineUniverse(
        center=tuple(center),
        time_slots=time_slots,
        weights=weights,
        cells=tuple(cells),
        lots=tuple(lots),
    )


def universe_from_config(cfg: DictConfig) -> BaselineUniverse:
    """
    Builds the universe from a loaded simulation config (see ConfigManager).
    """
    sim = cfg.simulation if 'simulation' in cfg else cfg
    slots = time_slot_labels(
        start=sim.timeline.start,
        count=sim.timeline.slots,
        step_minutes=sim.timeline.step_minutes
    )
    logger.info(f"Building universe around ({sim.center.lat}, {sim.center.lng})")
    return build_universe(
        center=(sim.center.lat, sim.center.lng),
        rows=sim.mesh.rows,
        cols=sim.mesh.cols,
        size_meters=sim.mesh.size_meters,
        lot_count=sim.parking.count,
        time_slots=slots,
        hotspot_seed=sim.mesh.hotspot_seed,
        parking_seed=sim.parking.seed,
    )
