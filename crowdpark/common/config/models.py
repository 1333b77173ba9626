from dataclasses import dataclass, field
from typing import Optional

@dataclass
class CenterConfig:
    lat: float = 43.1982
    lng: float = 140.9991

@dataclass
class MeshConfig:
    rows: int = 24
    cols: int = 24
    size_meters: float = 250.0
    hotspot_seed: int = 9021

@dataclass
class ParkingConfig:
    count: int = 60
    seed: int = 4217

@dataclass
class TimelineConfig:
    start: str = "11:00"
    slots: int = 15
    step_minutes: int = 15

@dataclass
class SimulationConfig:
    center: CenterConfig = field(default_factory=CenterConfig)
    mesh: MeshConfig = field(default_factory=MeshConfig)
    parking: ParkingConfig = field(default_factory=ParkingConfig)
    timeline: TimelineConfig = field(default_factory=TimelineConfig)
    time_index: int = 8
    scenario: Optional[str] = None
