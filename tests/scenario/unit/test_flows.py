import pytest
from crowdpark.scenario.context import build_scenario_context
from crowdpark.scenario.display import build_mesh_display
from crowdpark.scenario.domain import ScenarioContext, SpotAnchor, EMPTY_CONTEXT
from crowdpark.scenario.flows import build_flow_lines, build_curve_path
from crowdpark.scenario.geo import haversine_km, initial_bearing

GRID_CENTER = (43.1982, 140.9991)


def anchor(lat_offset, lng_offset, intensity):
    return SpotAnchor(center=(GRID_CENTER[0] + lat_offset, GRID_CENTER[1] + lng_offset), intensity=intensity)


@pytest.fixture
def context():
    return ScenarioContext(
        hotspots=(
            anchor(0.004, 0.002, 210),
            anchor(-0.003, 0.005, 190),
            anchor(0.001, -0.006, 160),
            anchor(-0.006, -0.002, 120),
        ),
        lowspots=(
            anchor(0.02, 0.03, 20),
            anchor(-0.025, 0.02, 25),
            anchor(0.02, -0.03, 150),
            anchor(-0.02, -0.02, 40),
        ),
        grid_center=GRID_CENTER,
    )

@pytest.fixture
def mesh(small_universe):
    return build_mesh_display(small_universe.cells, 8, None)


@pytest.mark.parametrize("scenario", [None, "", "unknown"])
def test_no_flows_without_scenario(mesh, context, scenario):
    assert build_flow_lines(scenario, mesh, context) == []

@pytest.mark.parametrize("scenario", ["peak", "demand", "balance", None])
def test_no_flows_with_empty_context(mesh, scenario):
    assert build_flow_lines(scenario, mesh, EMPTY_CONTEXT) == []
    assert build_flow_lines(scenario, mesh, None) == []

def test_no_flows_with_empty_mesh(context):
    assert build_flow_lines("peak", [], context) == []

def test_peak_pairs_top_three_with_cyclic_lowspots(mesh, context):
    flows = build_flow_lines("peak", mesh, context)
    assert len(flows) == 3
    assert [f.destination for f in flows] == [l.center for l in context.lowspots[:3]]
    assert [f.value for f in flows] == [190, 165, 10]
    assert flows[0].weight == 1
    assert flows[1].weight == 1
    assert flows[2].weight == 0.45
    for flow in flows:
        assert flow.trend == "down"
        assert flow.color == "#9a4b3a"

def test_demand_uses_offset_lowspots(mesh, context):
    flows = build_flow_lines("demand", mesh, context)
    assert len(flows) == 2
    assert flows[0].destination == context.lowspots[1].center
    assert flows[1].destination == context.lowspots[2].center
    assert [f.value for f in flows] == [185, 40]
    assert flows[0].weight == 0.95
    assert flows[1].weight == pytest.approx(0.4)
    assert {f.trend for f in flows} == {"down"}

def test_demand_lowspot_index_wraps(mesh):
    context = ScenarioContext(
        hotspots=(anchor(0.004, 0.0, 200), anchor(-0.004, 0.0, 180)),
        lowspots=(anchor(0.03, 0.03, 20),),
        grid_center=GRID_CENTER,
    )
    flows = build_flow_lines("demand", mesh, context)
    assert [f.destination for f in flows] == [context.lowspots[0].center] * 2

def test_balance_projects_outward(mesh, context):
    flows = build_flow_lines("balance", mesh, context)
    assert len(flows) == 4
    for flow, hotspot in zip(flows, context.hotspots):
        assert flow.origin == hotspot.center
        assert haversine_km(flow.origin, flow.destination) == pytest.approx(0.85, rel=1e-6)
        assert initial_bearing(GRID_CENTER, flow.destination) == pytest.approx(
            initial_bearing(GRID_CENTER, hotspot.center), abs=0.5
        )
        assert flow.trend == "out"
        assert flow.color == "#3f7f3b"
    assert [f.value for f in flows] == [140, 120, 90, 50]
    assert [f.weight for f in flows] == [pytest.approx(1.1666666), 1.0, 0.75, 0.5]

def test_balance_needs_grid_center(mesh, context):
    no_center = context.model_copy(update={"grid_center": None})
    assert build_flow_lines("balance", mesh, no_center) == []

def test_peak_needs_lowspots(mesh, context):
    no_low = context.model_copy(update={"lowspots": ()})
    assert build_flow_lines("peak", mesh, no_low) == []
    assert build_flow_lines("demand", mesh, no_low) == []

def test_paths_start_and_end_at_endpoints(mesh, context):
    for scenario in ("peak", "demand", "balance"):
        for flow in build_flow_lines(scenario, mesh, context):
            assert flow.path[0] == pytest.approx(flow.origin)
            assert flow.path[-1] == pytest.approx(flow.destination)
            assert len(flow.path) > 2

def test_alternating_curvature(context):
    origin = context.hotspots[0].center
    target = context.lowspots[0].center
    left = build_curve_path(origin, target, 0.25, 1)
    right = build_curve_path(origin, target, 0.25, -1)
    mid = len(left) // 2
    straight_lat = (origin[0] + target[0]) / 2
    assert (left[mid][0] - straight_lat) * (right[mid][0] - straight_lat) < 0

def test_short_segment_stays_straight():
    origin = GRID_CENTER
    target = (GRID_CENTER[0] + 0.0002, GRID_CENTER[1])
    assert build_curve_path(origin, target) == [origin, target]

def test_flow_serialises_with_from_and_to(mesh, context):
    flow = build_flow_lines("peak", mesh, context)[0]
    payload = flow.model_dump(by_alias=True)
    assert payload["from"] == flow.origin
    assert payload["to"] == flow.destination

def test_flows_on_generated_universe(small_universe):
    for scenario in ("peak", "demand", "balance"):
        mesh = build_mesh_display(small_universe.cells, 8, scenario)
        flows = build_flow_lines(scenario, mesh, build_scenario_context(scenario, mesh))
        assert flows
        for flow in flows:
            assert 0.4 <= flow.weight <= 1.2

# Samples along the default-strength curve from the district center to a point
# ~1.38 km north-east; index 250 is the bend's control point
REFERENCE_CURVE = {
    0: (43.1982, 140.9991),
    100: (43.198783586925451, 141.00131025261985),
    125: (43.19906671024436, 141.00220800602588),
    250: (43.201596553765469, 141.00711776312448),
    375: (43.205611725771107, 141.00889163934858),
    499: (43.208193570042063, 141.00910018162477),
    500: (43.2082, 141.0091),
}


def test_reference_curve_samples():
    path = build_curve_path(GRID_CENTER, (43.2082, 141.0091), 0.22, 1)
    assert len(path) == 501
    for index, expected in REFERENCE_CURVE.items():
        assert list(path[index]) == pytest.approx(list(expected), abs=1e-9)
