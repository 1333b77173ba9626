class SimulationError(Exception):
    """Base exception for all simulation errors."""
    pass

class ConfigurationError(SimulationError):
    """Raised when configuration is invalid."""
    pass

class InvalidTimeSlotsError(SimulationError, ValueError):
    """Raised when a time-weight profile is requested for fewer than two slots."""
    pass

class InvalidTimeIndexError(SimulationError, IndexError):
    """Raised when a time index falls outside the simulated day."""
    pass
