import pytest
from crowdpark.scenario.context import build_scenario_context
from crowdpark.scenario.display import build_mesh_display
from crowdpark.scenario.domain import MeshDisplayCell


def display(make_cell, counts):
    cells = []
    for index, count in enumerate(counts):
        cell = make_cell(row=0, col=index, center=(43.0 + index * 0.01, 141.0))
        cells.append(MeshDisplayCell(cell=cell, base_count=count, count=count))
    return cells


@pytest.mark.parametrize("scenario", [None, ""])
def test_null_scenario_gives_empty_context(make_cell, scenario):
    context = build_scenario_context(scenario, display(make_cell, [10, 20, 30]))
    assert context.hotspots == ()
    assert context.lowspots == ()
    assert context.grid_center is None
    assert context.is_empty

def test_empty_mesh_gives_empty_context():
    assert build_scenario_context("peak", []).is_empty

def test_hotspots_and_lowspots(make_cell):
    mesh = display(make_cell, [50, 200, 13, 90, 120, 15, 180, 60, 30])
    context = build_scenario_context("peak", mesh)
    assert [h.intensity for h in context.hotspots] == [200, 180, 120, 90]
    assert [l.intensity for l in context.lowspots] == [13, 15, 30, 50]
    assert context.hotspots[0].center == mesh[1].center

def test_ties_keep_enumeration_order(make_cell):
    mesh = display(make_cell, [100, 100, 100, 100, 100, 100])
    context = build_scenario_context("demand", mesh)
    # Hotspots take the first cells, lowspots the last cells in reverse
    assert [h.center for h in context.hotspots] == [m.center for m in mesh[:4]]
    assert [l.center for l in context.lowspots] == [m.center for m in mesh[::-1][:4]]

def test_grid_center_is_mean_of_centers(make_cell):
    mesh = display(make_cell, [1, 2, 3])
    context = build_scenario_context("balance", mesh)
    assert context.grid_center == pytest.approx((43.01, 141.0))

def test_ranking_uses_baseline_not_adjusted_count(make_cell):
    cells = [make_cell(col=i, center=(43.0, 141.0 + i * 0.01)) for i in range(5)]
    mesh = [
        MeshDisplayCell(cell=cells[i], base_count=base, count=adjusted)
        for i, (base, adjusted) in enumerate([(200, 10), (10, 200), (50, 50), (60, 60), (70, 70)])
    ]
    context = build_scenario_context("peak", mesh)
    assert context.hotspots[0].intensity == 200
    assert context.hotspots[0].center == cells[0].center

def test_context_on_generated_mesh(small_universe):
    mesh = build_mesh_display(small_universe.cells, 8, "balance")
    context = build_scenario_context("balance", mesh)
    counts = sorted((c.base_count for c in mesh), reverse=True)
    assert [h.intensity for h in context.hotspots] == counts[:4]
    assert [l.intensity for l in context.lowspots] == counts[::-1][:4]
