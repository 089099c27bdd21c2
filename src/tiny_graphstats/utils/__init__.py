"""
Miscellaneous utilities shared across tiny-graphstats.
"""

from .logging import logger
from .config import config
from .profiling import Profiler, StageTiming

__all__ = ["logger", "config", "Profiler", "StageTiming"]
