"""
Threshold bands shared by the rendering and reporting collaborators.
"""
from typing import Literal

Band = Literal['high', 'mid', 'low']

MESH_BAND_COLORS = {
    "high": "#f97316",
    "mid": "#facc15",
    "low": "#22c55e",
}

OCCUPANCY_COLORS = {
    "high": "#ef4444",
    "mid": "#facc15",
    "low": "#22c55e",
}


def mesh_band(count: float) -> Band:
    if count >= 110:
        return "high"
    if count >= 70:
        return "mid"
    return "low"


def occupancy_band(fraction: float) -> Band:
    if fraction >= 0.8:
        return "high"
    if fraction >= 0.55:
        return "mid"
    return "low"
