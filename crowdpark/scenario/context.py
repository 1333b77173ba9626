"""
Scenario context builder: ranks the current mesh into hotspots and lowspots.
"""
from typing import Optional, Sequence

from ..common.logging import setup_logger
from .domain import EMPTY_CONTEXT, MeshDisplayCell, ScenarioContext, SpotAnchor

logger = setup_logger(__name__)

SPOT_COUNT = 4


def build_scenario_context(
    scenario_id: Optional[str],
    mesh_display: Sequence[MeshDisplayCell]
) -> ScenarioContext:
    """
    Ranks cells by their baseline count at the current slot.

    Ties keep row-major enumeration order (sorted() is stable); lowspots are
    taken from the reversed ranking, so among tied cells the later one comes
    first.
    """
    if not scenario_id or not mesh_display:
        return EMPTY_CONTEXT

    ranked = sorted(mesh_display, key=lambda cell: cell.base_count, reverse=True)
    hotspots = tuple(
        SpotAnchor(center=cell.center, intensity=cell.base_count)
        for cell in ranked[:SPOT_COUNT]
    )
    lowspots = tuple(
        SpotAnchor(center=cell.center, intensity=cell.base_count)
        for cell in list(reversed(ranked))[:SPOT_COUNT]
    )

    # Sequential accumulation; sum() is compensated on 3.12+
    lat = lng = 0.0
    for cell in mesh_display:
        lat += cell.center[0]
        lng += cell.center[1]
    lat /= len(mesh_display)
    lng /= len(mesh_display)

    logger.debug(
        f"Context for {scenario_id}: top={[h.intensity for h in hotspots]} "
        f"bottom={[l.intensity for l in lowspots]}"
    )
    return ScenarioContext(hotspots=hotspots, lowspots=lowspots, grid_center=(lat, lng))
