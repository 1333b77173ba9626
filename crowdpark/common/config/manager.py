from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import Iterable, Optional

from .models import SimulationConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centraliza la carga y validación de configuración"""
    
    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = Path(config_dir)
    
    def load_simulation_config(
        self,
        profile: str = "default",
        overrides: Optional[Iterable[str]] = None
    ) -> DictConfig:
        """Carga configuración de simulación con validación"""
        config_path = self.config_dir / "simulation" / f"{profile}.yaml"
        
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")
        
        raw = OmegaConf.load(config_path)
        # Validación básica
        required_keys = ['center', 'mesh', 'parking']
        for key in required_keys:
            if key not in raw:
                raise ConfigurationError(f"Missing required config key: {key}")
        
        try:
            cfg = OmegaConf.merge(OmegaConf.structured(SimulationConfig), raw)
            if overrides:
                cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid simulation config {config_path}: {e}") from e
        
        self._validate(cfg)
        return cfg

    @staticmethod
    def _validate(cfg: DictConfig):
        if cfg.mesh.rows < 1 or cfg.mesh.cols < 1:
            raise ConfigurationError("Mesh needs at least one row and one column")
        if cfg.mesh.size_meters <= 0:
            raise ConfigurationError("Mesh cell size must be positive")
        if cfg.parking.count < 0:
            raise ConfigurationError("Parking lot count cannot be negative")
        if cfg.timeline.slots < 2:
            raise ConfigurationError("Timeline needs at least two slots")
        if not 0 <= cfg.time_index < cfg.timeline.slots:
            raise ConfigurationError(
                f"time_index {cfg.time_index} outside 0..{cfg.timeline.slots - 1}"
            )
