"""
Flow vector builder: directional redistribution implied by a scenario.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..common.logging import setup_logger
from ..common.utils import clamp, round_half_up
from ..simulation.constants import LatLng
from .domain import FlowLine, MeshDisplayCell, ScenarioContext, ScenarioId, SpotAnchor
from .geo import bezier_spline, destination_point, haversine_km, initial_bearing

logger = setup_logger(__name__)

MIN_CURVE_KM = 0.05
BALANCE_PROJECTION_KM = 0.85


@dataclass(frozen=True)
class FlowStyle:
    color: str
    label: str
    trend: str
    curve_strength: float
    # Curvature direction for even indices; odd indices flip it
    even_direction: int


PEAK_STYLE = FlowStyle("#9a4b3a", "Shift toward low-density areas", "down", 0.25, 1)
DEMAND_STYLE = FlowStyle("#b08b2a", "Demand-driven guidance", "down", 0.2, -1)
BALANCE_STYLE = FlowStyle("#3f7f3b", "Redistribute to the outer fringe", "out", 0.28, 1)


def build_curve_path(origin: LatLng, destination: LatLng,
                     curve_strength: float = 0.22, direction: int = 1) -> List[LatLng]:
    """
    Bows the segment sideways through a control point offset from its midpoint,
    then smooths it. Segments of 50 m or less stay straight.
    """
    distance = haversine_km(origin, destination)
    if not math.isfinite(distance) or distance <= MIN_CURVE_KM:
        return [tuple(origin), tuple(destination)]

    heading = initial_bearing(origin, destination)
    midpoint = destination_point(origin, distance * 0.5, heading)
    offset = clamp(distance * curve_strength, 0.12, 0.45)
    control = destination_point(midpoint, offset, heading + 90 * direction)
    return bezier_spline([origin, control, destination], sharpness=0.85)


def _direction(index: int, style: FlowStyle) -> int:
    return style.even_direction if index % 2 == 0 else -style.even_direction


def _flow(index: int, source: SpotAnchor, target: LatLng, delta: int,
          weight: float, style: FlowStyle) -> FlowLine:
    return FlowLine(
        origin=source.center,
        destination=target,
        path=build_curve_path(source.center, target, style.curve_strength, _direction(index, style)),
        weight=weight,
        color=style.color,
        label=style.label,
        value=delta,
        trend=style.trend,
    )


def _paired_flows(context: ScenarioContext, take: int, target_offset: int,
                  scale: float, lower: float, upper: float, style: FlowStyle) -> List[FlowLine]:
    flows = []
    lowspots = context.lowspots
    for index, hotspot in enumerate(context.hotspots[:take]):
        target = lowspots[(index + target_offset) % len(lowspots)]
        delta = max(0, round_half_up(hotspot.intensity - target.intensity))
        weight = clamp(delta / scale, lower, upper)
        flows.append(_flow(index, hotspot, target.center, delta, weight, style))
    return flows


def _outward_flows(context: ScenarioContext) -> List[FlowLine]:
    flows = []
    for index, hotspot in enumerate(context.hotspots[:4]):
        heading = initial_bearing(context.grid_center, hotspot.center)
        target = destination_point(hotspot.center, BALANCE_PROJECTION_KM, heading)
        delta = max(0, round_half_up(hotspot.intensity - 70))
        weight = clamp(delta / 120, 0.5, 1.2)
        flows.append(_flow(index, hotspot, target, delta, weight, BALANCE_STYLE))
    return flows


def build_flow_lines(
    scenario_id: Optional[str],
    mesh_display: Sequence[MeshDisplayCell],
    context: Optional[ScenarioContext]
) -> List[FlowLine]:
    """
    Returns an empty list for a null or unknown scenario, an empty mesh, or a
    context without the anchors the scenario needs.
    """
    scenario = ScenarioId.parse(scenario_id)
    if scenario is None or not mesh_display or context is None or not context.hotspots:
        return []

    if scenario is ScenarioId.PEAK:
        if not context.lowspots:
            return []
        flows = _paired_flows(context, 3, 0, 130, 0.45, 1, PEAK_STYLE)
    elif scenario is ScenarioId.DEMAND:
        if not context.lowspots:
            return []
        flows = _paired_flows(context, 2, 1, 140, 0.4, 0.95, DEMAND_STYLE)
    else:
        if context.grid_center is None:
            return []
        flows = _outward_flows(context)

    logger.debug(f"Built {len(flows)} flow lines for {scenario.value}")
    return flows
