"""
Before/after aggregates consumed by the reporting collaborator.
"""
from typing import Optional, Sequence, Tuple

import pandas as pd

from ..common.utils import round_half_up
from .bands import mesh_band
from .domain import ImpactStats, MeshDisplayCell, ParkingDisplayLot, ScenarioId

BASELINE_NARRATIVE = "Captured a baseline snapshot for comparison."


def mesh_frame(mesh_display: Sequence[MeshDisplayCell]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "cell_id": [m.cell.id for m in mesh_display],
            "label": [m.cell.label for m in mesh_display],
            "count_before": [m.base_count for m in mesh_display],
            "count_after": [m.count for m in mesh_display],
        }
    )


def parking_frame(parking_display: Sequence[ParkingDisplayLot]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "lot_id": [p.lot.id for p in parking_display],
            "occupancy_before": [p.base_occupancy * 100 for p in parking_display],
            "occupancy_after": [p.occupancy * 100 for p in parking_display],
            "price_before": [p.base_price for p in parking_display],
            "price_after": [p.price for p in parking_display],
        }
    )


def impact_frame(
    mesh_display: Sequence[MeshDisplayCell],
    parking_display: Sequence[ParkingDisplayLot]
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Per-entity before/after values as (mesh, parking) frames, one row per
    cell and per lot in display order.
    """
    return mesh_frame(mesh_display), parking_frame(parking_display)


def _rounded_mean(series: pd.Series) -> int:
    return round_half_up(series.mean()) if len(series) else 0


def _peak(series: pd.Series) -> int:
    return int(series.max()) if len(series) else 0


def summarize_impact(
    mesh_display: Sequence[MeshDisplayCell],
    parking_display: Sequence[ParkingDisplayLot],
    scenario_id: Optional[str]
) -> ImpactStats:
    """
    Mean and peak mesh counts, mean occupancy (percent) and mean price, each
    before and after the scenario. Null and unknown ids get the baseline
    narrative.
    """
    mesh, parking = impact_frame(mesh_display, parking_display)

    peak_before = _peak(mesh["count_before"])
    peak_after = _peak(mesh["count_after"])
    peak_drop = 0
    if peak_before:
        peak_drop = max(0, round_half_up((peak_before - peak_after) / peak_before * 100))

    if ScenarioId.parse(scenario_id) is not None:
        narrative = (
            f"Peak density fell by {peak_drop}% and average occupancy moved "
            "toward the target band."
        )
    else:
        narrative = BASELINE_NARRATIVE

    return ImpactStats(
        avg_before=_rounded_mean(mesh["count_before"]),
        avg_after=_rounded_mean(mesh["count_after"]),
        peak_before=peak_before,
        peak_after=peak_after,
        occupancy_before=_rounded_mean(parking["occupancy_before"]),
        occupancy_after=_rounded_mean(parking["occupancy_after"]),
        price_before=_rounded_mean(parking["price_before"]),
        price_after=_rounded_mean(parking["price_after"]),
        peak_drop=peak_drop,
        high_cells_before=int((mesh["count_before"].map(mesh_band) == "high").sum()),
        high_cells_after=int((mesh["count_after"].map(mesh_band) == "high").sum()),
        narrative=narrative,
    )
