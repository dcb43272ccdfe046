"""Utility modules for the Argument Coach engine."""
from .logger import CoachLogger, LogLevel, create_logger, setup_logging, PerformanceTimer

__all__ = [
    'CoachLogger',
    'LogLevel',
    'create_logger',
    'setup_logging',
    'PerformanceTimer'
]
