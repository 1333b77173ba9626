from dataclasses import dataclass
from typing import Dict, List
import time

@dataclass
class RecomputeMetrics:
    """Scenario recomputation metrics"""
    frames_computed: int
    cache_hits: int
    avg_compute_time_ms: float
    max_compute_time_ms: float
    uptime_seconds: float

    @property
    def hit_ratio(self) -> float:
        total = self.frames_computed + self.cache_hits
        return self.cache_hits / total if total else 0.0
    
    def to_dict(self) -> Dict:
        return {
            'frames_computed': self.frames_computed,
            'cache_hits': self.cache_hits,
            'avg_compute_time_ms': self.avg_compute_time_ms,
            'max_compute_time_ms': self.max_compute_time_ms,
            'uptime_seconds': self.uptime_seconds,
            'hit_ratio': self.hit_ratio
        }


class MetricsCollector:
    """Collects and aggregates scenario engine metrics"""
    
    def __init__(self):
        self.compute_times: List[float] = []
        self.frames_computed = 0
        self.cache_hits = 0
        self.start_time = time.time()
    
    def record_compute(self, duration_ms: float):
        self.compute_times.append(duration_ms)
        self.frames_computed += 1
        # Keep buffer size manageable
        if len(self.compute_times) > 1000:
            self.compute_times.pop(0)
    
    def record_cache_hit(self):
        self.cache_hits += 1
    
    def get_metrics(self) -> RecomputeMetrics:
        avg = sum(self.compute_times) / len(self.compute_times) if self.compute_times else 0.0
        peak = max(self.compute_times) if self.compute_times else 0.0
        
        return RecomputeMetrics(
            frames_computed=self.frames_computed,
            cache_hits=self.cache_hits,
            avg_compute_time_ms=avg,
            max_compute_time_ms=peak,
            uptime_seconds=time.time() - self.start_time
        )
