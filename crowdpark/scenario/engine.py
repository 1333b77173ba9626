"""
Scenario engine: derives display state for a (time index, scenario) pair from
the immutable baseline, memoising each pair.
"""
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..common.logging import FrameLoggerAdapter, frame_tag, log_execution_time, setup_logger
from ..common.metrics import MetricsCollector
from ..common.utils import check_time_index
from ..simulation.universe import BaselineUniverse
from .context import build_scenario_context
from .display import build_mesh_display, build_parking_display
from .domain import (
    FlowLine, ImpactStats, MeshDisplayCell, ParkingDisplayLot,
    ScenarioCase, ScenarioContext, ScenarioId, get_scenario_case
)
from .flows import build_flow_lines
from .report import summarize_impact

logger = setup_logger(__name__)


def _describe_frame(engine: "ScenarioEngine", time_index: int, scenario: Optional[ScenarioId]) -> str:
    return frame_tag(engine.universe.time_slots[time_index], scenario.value if scenario else None)


@dataclass(frozen=True)
class ScenarioFrame:
    """
    Everything a render pass needs for one slot under one scenario.
    """
    time_index: int
    time_label: str
    scenario: Optional[ScenarioCase]
    mesh: Tuple[MeshDisplayCell, ...]
    parking: Tuple[ParkingDisplayLot, ...]
    context: ScenarioContext
    flows: Tuple[FlowLine, ...]
    stats: ImpactStats


class ScenarioEngine:
    """
    Recomputes frames on demand. The baseline is never mutated, so frames for
    different pairs can be computed independently.
    """

    def __init__(self, universe: BaselineUniverse, metrics_collector: Optional[MetricsCollector] = None):
        self.universe = universe
        self.metrics_collector = metrics_collector or MetricsCollector()
        self._cache: Dict[Tuple[int, Optional[ScenarioId]], ScenarioFrame] = {}

    def frame(self, time_index: int, scenario_id: Optional[str] = None) -> ScenarioFrame:
        check_time_index(time_index, self.universe.slot_count)

        scenario = ScenarioId.parse(scenario_id)
        if scenario_id and scenario is None:
            frame_logger = FrameLoggerAdapter(logger, self.universe.time_slots[time_index], None)
            frame_logger.warning(f"Unknown scenario '{scenario_id}', showing baseline")

        key = (time_index, scenario)
        cached = self._cache.get(key)
        if cached is not None:
            self.metrics_collector.record_cache_hit()
            return cached

        start = time.perf_counter()
        frame = self._compute(time_index, scenario)
        self.metrics_collector.record_compute((time.perf_counter() - start) * 1000)
        self._cache[key] = frame
        return frame

    @log_execution_time(logger, describe=_describe_frame)
    def _compute(self, time_index: int, scenario: Optional[ScenarioId]) -> ScenarioFrame:
        scenario_id = scenario.value if scenario else None
        mesh = build_mesh_display(self.universe.cells, time_index, scenario_id)
        context = build_scenario_context(scenario_id, mesh)
        parking = build_parking_display(self.universe.lots, time_index, scenario_id, context)
        flows = build_flow_lines(scenario_id, mesh, context)
        stats = summarize_impact(mesh, parking, scenario_id)
        return ScenarioFrame(
            time_index=time_index,
            time_label=self.universe.time_slots[time_index],
            scenario=get_scenario_case(scenario),
            mesh=tuple(mesh),
            parking=tuple(parking),
            context=context,
            flows=tuple(flows),
            stats=stats,
        )

    def clear_cache(self):
        self._cache.clear()
