import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER = "crowdpark"
SLOW_CALL_SECONDS = 0.01

def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Sets up a logger under the ``crowdpark`` namespace with a standard format.
    Bare names such as ``"export"`` become ``"crowdpark.export"``.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger

def frame_tag(time_label: str, scenario: Optional[str]) -> str:
    """Short tag identifying a render pass, e.g. ``[12:45|peak]``."""
    return f"[{time_label}|{scenario or 'baseline'}]"

class FrameLoggerAdapter(logging.LoggerAdapter):
    """
    Prefixes every message with the slot label and scenario of the frame
    being computed.
    """

    def __init__(self, logger: logging.Logger, time_label: str, scenario: Optional[str]):
        super().__init__(logger, {"time_label": time_label, "scenario": scenario or "baseline"})

    def process(self, msg, kwargs):
        return f"{frame_tag(self.extra['time_label'], self.extra['scenario'])} {msg}", kwargs

def log_execution_time(logger: logging.Logger, describe: Optional[Callable[..., str]] = None):
    """
    Decorator to measure and log execution time of a function.

    ``describe`` receives the call's arguments and returns a tag appended to
    the timing and failure lines.
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            tag = f" {describe(*args, **kwargs)}" if describe else ""
            try:
                result = func(*args, **kwargs)
                elapsed = time.perf_counter() - start
                if logger.isEnabledFor(logging.DEBUG) or elapsed > SLOW_CALL_SECONDS:
                    logger.debug(f"{func.__name__}{tag} executed in {elapsed:.3f}s")
                return result
            except Exception as e:
                logger.error(f"{func.__name__}{tag} failed: {e}", exc_info=True)
                raise
        return wrapper
    return decorator
