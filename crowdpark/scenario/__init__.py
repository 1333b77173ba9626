"""
Scenario module initialization.
"""
from .domain import (
    ScenarioId,
    ScenarioCase,
    SCENARIO_CASES,
    get_scenario_case,
    SpotAnchor,
    ScenarioContext,
    EMPTY_CONTEXT,
    FlowLine,
    ParkingValue,
    MeshDisplayCell,
    ParkingDisplayLot,
    ImpactStats,
)
from .context import build_scenario_context
from .transforms import (
    transform_mesh_count,
    transform_parking,
    peak_price_multiplier,
    demand_price_multiplier,
)
from .flows import build_flow_lines, build_curve_path
from .display import build_mesh_display, build_parking_display
from .report import impact_frame, summarize_impact
from .engine import ScenarioEngine, ScenarioFrame
