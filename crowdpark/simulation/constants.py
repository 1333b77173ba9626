"""
Fixed reference data for the simulated district.
"""
from typing import Tuple

LatLng = Tuple[float, float]

CENTER: LatLng = (43.1982, 140.9991)

MESH_ROWS = 24
MESH_COLS = 24
CELL_SIZE_METERS = 250.0
METERS_PER_DEGREE = 111000.0

COUNT_MIN = 12
COUNT_MAX = 230

HOTSPOT_SEED = 9021
HOTSPOT_COUNT = 4
BIAS_STREAM_MULTIPLIER = 19
NOISE_STREAM_MULTIPLIER = 131

CORE_CUTOFF = 0.45
EDGE_CUTOFF = 0.75
LABEL_CORE = "Canal Core"
LABEL_RING = "Canal Ring"
LABEL_EDGE = "Outer Fringe"

PARKING_SEED = 4217
PARKING_LOT_COUNT = 60
PARKING_STREAM_MULTIPLIER = 13
PARKING_MAX_RADIUS = 0.026
PARKING_LNG_STRETCH = 1.25
PARKING_DISTANCE_SCALE = 0.028
PARKING_CORE_RADIUS = 0.008
OCCUPANCY_MIN = 0.12
OCCUPANCY_MAX = 0.98
SURGE_PER_OCCUPANCY = 420
LUNCH_SLOTS = range(6, 10)
LUNCH_UPLIFT = 60

LOT_NAME_PREFIXES = (
    "Canal",
    "Market",
    "Warehouse",
    "Harbor",
    "Station",
    "Promenade",
    "Heritage",
    "Bridge",
    "Unga",
    "Historic",
    "Pier",
    "North",
    "South",
    "East",
    "West",
)

LOT_NAME_SUFFIXES = (
    "Lot",
    "Deck",
    "Terrace",
    "Hub",
    "Gate",
    "Square",
    "Yard",
    "Garage",
)

TIMELINE_START = "11:00"
TIMELINE_SLOTS = 15
TIMELINE_STEP_MINUTES = 15
