"""
Logging utility for the Argument Coach engine.

CoachLogger wraps the module logger with a verbosity level so the router
and role agents can report routing phases, per-session analysis outcomes
and learning-style decisions without flooding standard output.
"""
import time
import logging
from typing import Optional, Dict, Any, List
from enum import Enum
from contextlib import contextmanager

from config import LOG_FORMAT, LOG_LEVEL, VERBOSE

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "argument_coach"


class LogLevel(Enum):
    """Log verbosity levels."""
    MINIMAL = "minimal"      # Failures only
    STANDARD = "standard"    # Routing milestones and warnings
    VERBOSE = "verbose"      # Per-message scores and timings

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.STANDARD


_RANK = {LogLevel.MINIMAL: 0, LogLevel.STANDARD: 1, LogLevel.VERBOSE: 2}


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure handlers once and set the engine's package logger level."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    return package_logger


class PerformanceTimer:
    """Times one operation; warns when it exceeds the threshold."""

    def __init__(self, operation: str, warn_threshold_ms: float = 200):
        self.operation = operation
        self.warn_threshold_ms = warn_threshold_ms
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.time()
        if self.elapsed_ms() > self.warn_threshold_ms:
            logger.warning(
                f"Slow operation: {self.operation} took {self.elapsed_ms():.0f}ms "
                f"(threshold: {self.warn_threshold_ms:.0f}ms)"
            )

    def elapsed_ms(self) -> float:
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.time()
        return (end - self.start_time) * 1000


class CoachLogger:
    """Named, level-filtered logger with counters and timers."""

    def __init__(self, name: str, level: LogLevel = LogLevel.STANDARD, verbose: bool = False):
        self.name = name
        self.level = LogLevel.VERBOSE if verbose else level
        self.metrics: Dict[str, Any] = {}
        self.timers: Dict[str, PerformanceTimer] = {}

    def enabled(self, required: LogLevel) -> bool:
        return _RANK[self.level] >= _RANK[required]

    def info(self, message: str, level: LogLevel = LogLevel.STANDARD):
        if self.enabled(level):
            logger.info(f"[{self.name}] {message}")

    def debug(self, message: str):
        if self.enabled(LogLevel.VERBOSE):
            logger.debug(f"[{self.name}] {message}")

    def warning(self, message: str, level: LogLevel = LogLevel.MINIMAL):
        if self.enabled(level):
            logger.warning(f"[{self.name}] ⚠️ {message}")

    def phase(self, message: str):
        if self.enabled(LogLevel.STANDARD):
            logger.info(f"[{self.name}] 🔄 {message}")

    def success(self, message: str):
        if self.enabled(LogLevel.STANDARD):
            logger.info(f"[{self.name}] ✅ {message}")

    def metric(self, key: str, value: Any):
        self.metrics[key] = value
        self.debug(f"📊 {key}: {value}")

    def increment(self, key: str) -> int:
        """Bump a counter metric and return its new value."""
        value = self.metrics.get(key, 0) + 1
        self.metric(key, value)
        return value

    @contextmanager
    def timer(self, operation: str, warn_threshold_ms: float = 200):
        timer = PerformanceTimer(operation, warn_threshold_ms)
        self.timers[operation] = timer
        with timer:
            yield timer
        self.debug(f"{operation} completed in {timer.elapsed_ms():.0f}ms")

    def analysis_result(self, session_id: str, total: float,
                        weaknesses: List[str], strengths: List[str]):
        """Log one analysis outcome; many weaknesses at once is worth a warning."""
        self.debug(
            f"session {session_id}: total={total:.2f} "
            f"weaknesses={weaknesses} strengths={strengths}"
        )
        if len(weaknesses) >= 4:
            self.warning(f"session {session_id}: {len(weaknesses)} weaknesses flagged", LogLevel.STANDARD)

    def modality_result(self, student_id: Optional[str], modality: str, scores: Dict[str, int]):
        self.debug(f"learning style for {student_id or 'anonymous'}: {modality} {scores}")

    def route_result(self, message_id: str, to_agent: str, status: str, error: Optional[str] = None):
        if error:
            self.warning(f"{message_id} -> {to_agent}: {status} ({error})")
        else:
            self.success(f"{message_id} -> {to_agent}: {status}")

    def get_summary(self) -> str:
        lines = [f"\n{'='*60}", f"Coach Metrics: {self.name}", f"{'='*60}"]
        lines.extend(f"  {key}: {value}" for key, value in self.metrics.items())

        if self.timers:
            lines.append("\nOperation Timings:")
            lines.extend(f"  {op}: {t.elapsed_ms():.0f}ms" for op, t in self.timers.items())

        lines.append("=" * 60)
        return "\n".join(lines)


def create_logger(name: str, level: Optional[LogLevel] = None,
                  verbose: bool = False) -> CoachLogger:
    """Factory function to create a CoachLogger (level and verbosity default to config)."""
    return CoachLogger(name, level or LogLevel.parse(LOG_LEVEL), verbose or VERBOSE)
