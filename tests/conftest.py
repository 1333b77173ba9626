import pytest
from crowdpark.simulation import build_universe
from crowdpark.simulation.domain import Cell, ParkingLot

@pytest.fixture(scope="session")
def universe():
    return build_universe()

@pytest.fixture(scope="session")
def small_universe():
    return build_universe(rows=6, cols=6, lot_count=8)

@pytest.fixture
def make_cell():
    def _make(row=0, col=0, counts=(100,) * 15, is_core=False, is_edge=False, center=(43.1982, 140.9991)):
        lat, lng = center
        label = "Canal Core" if is_core else "Outer Fringe" if is_edge else "Canal Ring"
        return Cell(
            id=f"M-{row}-{col}",
            row=row,
            col=col,
            polygon=((lat, lng), (lat + 0.001, lng), (lat + 0.001, lng + 0.001), (lat, lng + 0.001)),
            center=center,
            counts=counts,
            is_core=is_core,
            is_edge=is_edge,
            label=label,
        )
    return _make

@pytest.fixture
def make_lot():
    def _make(occupancy=(0.5,) * 15, price=(300,) * 15, position=(43.1982, 140.9991), is_core=False):
        return ParkingLot(
            id="P-99",
            name="Test Lot",
            position=position,
            offset=(0.0, 0.0),
            capacity=100,
            base_price=300,
            occupancy=occupancy,
            price=price,
            is_core=is_core,
        )
    return _make
