"""
Per-slot display state: baseline values paired with their scenario variants.
"""
from typing import List, Optional, Sequence

from ..common.utils import check_time_index
from ..simulation.domain import Cell, ParkingLot
from .domain import MeshDisplayCell, ParkingDisplayLot, ScenarioContext
from .transforms import transform_mesh_count, transform_parking


def build_mesh_display(cells: Sequence[Cell], time_index: int,
                       scenario_id: Optional[str]) -> List[MeshDisplayCell]:
    display = []
    for cell in cells:
        base_count = cell.counts[check_time_index(time_index, len(cell.counts))]
        display.append(MeshDisplayCell(
            cell=cell,
            base_count=base_count,
            count=transform_mesh_count(base_count, cell, scenario_id),
        ))
    return display


def build_parking_display(lots: Sequence[ParkingLot], time_index: int,
                          scenario_id: Optional[str],
                          context: Optional[ScenarioContext] = None) -> List[ParkingDisplayLot]:
    # transform_parking rejects indices outside the lot's series
    display = []
    for lot in lots:
        value = transform_parking(lot, time_index, scenario_id, context)
        display.append(ParkingDisplayLot(
            lot=lot,
            base_occupancy=lot.occupancy[time_index],
            base_price=lot.price[time_index],
            occupancy=value.occupancy,
            price=value.price,
        ))
    return display
