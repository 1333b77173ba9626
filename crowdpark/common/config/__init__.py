from .models import SimulationConfig, CenterConfig, MeshConfig, ParkingConfig, TimelineConfig
from .manager import ConfigManager

__all__ = [
    "SimulationConfig",
    "CenterConfig",
    "MeshConfig",
    "ParkingConfig",
    "TimelineConfig",
    "ConfigManager",
]
