"""
Mesh field generator.

Lays a rows x cols grid of equirectangular cells around a center point, blends
a radial core, a north-south corridor and a few seeded Gaussian hotspots into a
baseline intensity per cell, then expands it into a count per time slot.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..common.exceptions import InvalidTimeSlotsError
from ..common.logging import setup_logger, log_execution_time
from ..common.utils import clamp, round_half_up
from . import constants as C
from .constants import LatLng
from .domain import Cell
from .rng import create, stream_for
from .time_weights import TIME_WEIGHTS

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Hotspot:
    """Gaussian intensity bump in grid (row, col) units."""
    row: float
    col: float
    spread: float
    power: float

    def contribution(self, row: int, col: int) -> float:
        distance = math.hypot(row - self.row, col - self.col)
        return self.power * gaussian(distance, self.spread)


@dataclass(frozen=True)
class GridGeometry:
    rows: int
    cols: int
    lat_delta: float
    lng_delta: float
    start_lat: float
    start_lng: float

    @property
    def center_row(self) -> float:
        return (self.rows - 1) / 2

    @property
    def center_col(self) -> float:
        return (self.cols - 1) / 2

    @property
    def max_distance(self) -> float:
        return math.hypot(self.center_row, self.center_col)

    def distance_from_center(self, row: int, col: int) -> float:
        return math.hypot(row - self.center_row, col - self.center_col)


def gaussian(distance: float, spread: float) -> float:
    return math.exp(-(distance * distance) / (2 * spread * spread))


def grid_geometry(center: LatLng, rows: int, cols: int, size_meters: float) -> GridGeometry:
    lat, lng = center
    lat_delta = size_meters / C.METERS_PER_DEGREE
    lng_delta = size_meters / (C.METERS_PER_DEGREE * math.cos((lat * math.pi) / 180))
    return GridGeometry(
        rows=rows,
        cols=cols,
        lat_delta=lat_delta,
        lng_delta=lng_delta,
        start_lat=lat - (rows / 2) * lat_delta,
        start_lng=lng - (cols / 2) * lng_delta,
    )


def place_hotspots(geometry: GridGeometry, seed: int = C.HOTSPOT_SEED,
                   count: int = C.HOTSPOT_COUNT) -> List[Hotspot]:
    """
    Draws hotspots within 60% of the grid extent around its geometric center.
    Draw order per hotspot is row, col, spread, power.
    """
    rand = create(seed)
    hotspots = []
    for _ in range(count):
        row = clamp(geometry.center_row + (rand() - 0.5) * geometry.rows * 0.6, 0, geometry.rows - 1)
        col = clamp(geometry.center_col + (rand() - 0.5) * geometry.cols * 0.6, 0, geometry.cols - 1)
        spread = 2.6 + rand() * 4.4
        power = 0.55 + rand() * 0.6
        hotspots.append(Hotspot(row=row, col=col, spread=spread, power=power))
    return hotspots


def baseline_intensity(row: int, col: int, geometry: GridGeometry,
                       hotspots: Sequence[Hotspot]) -> float:
    distance = geometry.distance_from_center(row, col)
    core = clamp(1 - distance / (geometry.max_distance * 0.95), 0.08, 1)
    corridor = 0.6 + 0.4 * math.exp(-(((col - geometry.center_col) / (geometry.cols * 0.18)) ** 2))
    hotspot = clamp(sum(h.contribution(row, col) for h in hotspots) / 1.7, 0, 1)
    return 35 + 165 * clamp(0.55 * core + 0.45 * hotspot, 0.1, 1) * corridor


def slot_counts(cell_id: str, row: int, col: int, base: float,
                weights: Sequence[float]) -> List[int]:
    """
    Expands a baseline intensity into one clamped count per time slot.
    """
    bias_stream = stream_for(cell_id, C.BIAS_STREAM_MULTIPLIER)
    bias = 1 + (bias_stream() - 0.5) * 0.2
    ripple = (bias_stream() - 0.5) * 0.12
    noise_stream = stream_for(cell_id, C.NOISE_STREAM_MULTIPLIER)

    counts = []
    last = len(weights) - 1
    for index, weight in enumerate(weights):
        t = (index / last) * math.pi * 2
        wave = (
            1
            + 0.1 * math.sin(t + row * 0.24 + ripple)
            + 0.06 * math.cos(t * 1.4 + col * 0.2)
        )
        noise = (noise_stream() - 0.5) * 22
        value = clamp(base * weight * bias * wave + noise, C.COUNT_MIN, C.COUNT_MAX)
        counts.append(round_half_up(value))
    return counts


def classify(distance: float, max_distance: float):
    ring_cutoff = max_distance * C.CORE_CUTOFF
    edge_cutoff = max_distance * C.EDGE_CUTOFF
    is_core = distance < ring_cutoff
    is_edge = distance > edge_cutoff
    if is_core:
        label = C.LABEL_CORE
    elif is_edge:
        label = C.LABEL_EDGE
    else:
        label = C.LABEL_RING
    return is_core, is_edge, label


@log_execution_time(logger)
def generate_mesh_field(
    center: LatLng = C.CENTER,
    rows: int = C.MESH_ROWS,
    cols: int = C.MESH_COLS,
    size_meters: float = C.CELL_SIZE_METERS,
    weights: Optional[Sequence[float]] = None,
    hotspot_seed: int = C.HOTSPOT_SEED
) -> List[Cell]:
    """
    Builds the baseline mesh in row-major order.

    :param center: District center (lat, lng)
    :param rows: Grid rows
    :param cols: Grid columns
    :param size_meters: Cell edge length
    :param weights: Time-weight profile; defaults to the standard 15-slot day
    :param hotspot_seed: Seed for hotspot placement
    :return: Cells with one count per time slot
    """
    weights = TIME_WEIGHTS if weights is None else weights
    if len(weights) < 2:
        raise InvalidTimeSlotsError(f"mesh field needs at least 2 time slots, got {len(weights)}")
    geometry = grid_geometry(center, rows, cols, size_meters)
    hotspots = place_hotspots(geometry, seed=hotspot_seed)

    cells = []
    for row in range(rows):
        for col in range(cols):
            lat = geometry.start_lat + row * geometry.lat_delta
            lng = geometry.start_lng + col * geometry.lng_delta
            cell_id = f"M-{row}-{col}"
            base = baseline_intensity(row, col, geometry, hotspots)
            is_core, is_edge, label = classify(
                geometry.distance_from_center(row, col), geometry.max_distance
            )
            cells.append(Cell(
                id=cell_id,
                row=row,
                col=col,
                polygon=(
                    (lat, lng),
                    (lat + geometry.lat_delta, lng),
                    (lat + geometry.lat_delta, lng + geometry.lng_delta),
                    (lat, lng + geometry.lng_delta),
                ),
                center=(lat + geometry.lat_delta / 2, lng + geometry.lng_delta / 2),
                counts=slot_counts(cell_id, row, col, base, weights),
                is_core=is_core,
                is_edge=is_edge,
                label=label,
            ))

    logger.info(f"Generated mesh field: {rows}x{cols} cells, {len(weights)} slots, {len(hotspots)} hotspots")
    return cells
