import math
import pytest
from pydantic import ValidationError
from crowdpark.common.exceptions import InvalidTimeSlotsError
from crowdpark.simulation import constants as C
from crowdpark.simulation.mesh import (
    generate_mesh_field, grid_geometry, place_hotspots, slot_counts, classify
)


def test_default_mesh_shape(universe):
    assert len(universe.cells) == 24 * 24
    for cell in universe.cells:
        assert len(cell.counts) == 15

def test_row_major_order_and_ids(universe):
    cells = universe.cells
    assert cells[0].id == "M-0-0"
    assert cells[1].id == "M-0-1"
    assert cells[24].id == "M-1-0"
    assert cells[-1].id == "M-23-23"
    for cell in cells:
        assert cell.id == f"M-{cell.row}-{cell.col}"

def test_counts_within_clamp(universe):
    for cell in universe.cells:
        for count in cell.counts:
            assert isinstance(count, int)
            assert 12 <= count <= 230

def test_generation_is_deterministic():
    first = generate_mesh_field(rows=8, cols=8)
    second = generate_mesh_field(rows=8, cols=8)
    assert [c.model_dump() for c in first] == [c.model_dump() for c in second]

def test_hotspot_seed_changes_field():
    first = generate_mesh_field(rows=8, cols=8, hotspot_seed=9021)
    second = generate_mesh_field(rows=8, cols=8, hotspot_seed=77)
    assert [c.counts for c in first] != [c.counts for c in second]

def test_polygon_is_axis_aligned_quad(universe):
    lat_delta = 250 / 111000
    lng_delta = 250 / (111000 * math.cos(C.CENTER[0] * math.pi / 180))
    cell = universe.cells[0]
    (lat0, lng0), (lat1, lng1), (lat2, lng2), (lat3, lng3) = cell.polygon
    assert lat1 - lat0 == pytest.approx(lat_delta)
    assert lng1 == lng0
    assert lat2 == lat1
    assert lng2 - lng1 == pytest.approx(lng_delta)
    assert lat3 == lat0
    assert cell.center == pytest.approx((lat0 + lat_delta / 2, lng0 + lng_delta / 2))

def test_grid_is_centered_on_center_point(universe):
    lats = [c.center[0] for c in universe.cells]
    lngs = [c.center[1] for c in universe.cells]
    assert sum(lats) / len(lats) == pytest.approx(C.CENTER[0], abs=1e-9)
    assert sum(lngs) / len(lngs) == pytest.approx(C.CENTER[1], abs=1e-9)

def test_zone_labels_match_flags(universe):
    labels = {c.label for c in universe.cells}
    assert labels == {"Canal Core", "Canal Ring", "Outer Fringe"}
    for cell in universe.cells:
        assert not (cell.is_core and cell.is_edge)
        if cell.is_core:
            assert cell.label == "Canal Core"
        elif cell.is_edge:
            assert cell.label == "Outer Fringe"
        else:
            assert cell.label == "Canal Ring"

def test_core_is_busier_than_fringe(universe):
    core = [c.counts[8] for c in universe.cells if c.is_core]
    edge = [c.counts[8] for c in universe.cells if c.is_edge]
    assert sum(core) / len(core) > sum(edge) / len(edge)

def test_classify_cutoffs():
    assert classify(0.0, 10.0) == (True, False, "Canal Core")
    assert classify(4.5, 10.0) == (False, False, "Canal Ring")
    assert classify(7.5, 10.0) == (False, False, "Canal Ring")
    assert classify(7.6, 10.0) == (False, True, "Outer Fringe")

def test_hotspots_stay_inside_grid():
    geometry = grid_geometry(C.CENTER, 24, 24, 250)
    hotspots = place_hotspots(geometry)
    assert len(hotspots) == 4
    for h in hotspots:
        assert 0 <= h.row <= 23
        assert 0 <= h.col <= 23
        assert 2.6 <= h.spread <= 7.0
        assert 0.55 <= h.power <= 1.15

def test_slot_counts_same_id_same_series():
    weights = [0.5, 0.8, 1.0]
    assert slot_counts("M-2-2", 2, 2, 120.0, weights) == slot_counts("M-2-2", 2, 2, 120.0, weights)

def test_single_slot_profile_rejected():
    with pytest.raises(InvalidTimeSlotsError):
        generate_mesh_field(rows=2, cols=2, weights=[1.0])

def test_cells_are_immutable(universe):
    with pytest.raises(ValidationError):
        universe.cells[0].counts = (50,) * 15

def test_cell_rejects_out_of_range_counts(make_cell):
    with pytest.raises(ValidationError):
        make_cell(counts=(5,) * 15)

# Counts per slot for the default district, as published by the reference data set
REFERENCE_COUNTS = {
    "M-0-0": [13, 30, 33, 37, 31, 43, 47, 51, 47, 46, 35, 21, 12, 12, 26],
    "M-11-11": [58, 55, 68, 75, 100, 108, 127, 139, 149, 130, 110, 91, 78, 54, 61],
    "M-23-23": [14, 18, 19, 34, 34, 36, 35, 48, 42, 27, 20, 13, 12, 12, 13],
    "M-5-17": [38, 59, 66, 75, 81, 84, 95, 94, 73, 63, 57, 42, 45, 42, 40],
}


@pytest.mark.parametrize("cell_id", sorted(REFERENCE_COUNTS))
def test_reference_counts(universe, cell_id):
    cell = next(c for c in universe.cells if c.id == cell_id)
    assert list(cell.counts) == REFERENCE_COUNTS[cell_id]
