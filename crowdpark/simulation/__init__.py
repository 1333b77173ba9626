"""
Baseline simulation module initialization.
"""
from .domain import Cell, ParkingLot
from .rng import SeededStream, create, key_seed, stream_for
from .time_weights import time_weights, time_slot_labels, TIME_SLOTS, TIME_WEIGHTS
from .mesh import generate_mesh_field
from .parking import generate_parking_inventory
from .universe import BaselineUniverse, build_universe, universe_from_config
