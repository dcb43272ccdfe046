"""
Session Progress Tracker - Records analyses per session and reports the trend.

Trend compares the mean overall.total of the last 3 analyses with the 3
before them: > +0.1 improving, < -0.1 declining, otherwise stable.
"""
import time
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
import logging

import numpy as np

from .session_store import SessionStore, slice_window
from ..scoring.text_scorer import Analysis
from ..feedback.generator import FeedbackItem
from config import ProgressConfig

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "insufficient_data"
IMPROVING = "improving"
STABLE = "stable"
DECLINING = "declining"


@dataclass(frozen=True)
class SessionEntry:
    analysis: Analysis
    feedback: List[FeedbackItem] = field(default_factory=list)
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class ProgressReport:
    trend: str
    improvement: float = 0.0
    current_score: Optional[float] = None
    previous_score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"trend": self.trend, "improvement": self.improvement}
        if self.trend != INSUFFICIENT_DATA:
            data["current_score"] = self.current_score
            data["previous_score"] = self.previous_score
        return data


def classify_trend(improvement: float, threshold: float = ProgressConfig.TREND_THRESHOLD) -> str:
    if improvement > threshold:
        return IMPROVING
    if improvement < -threshold:
        return DECLINING
    return STABLE


def average_score(entries: List[SessionEntry]) -> float:
    if not entries:
        return 0.0
    return float(np.mean([e.analysis.overall.total for e in entries]))


class ProgressTracker:
    """Sole owner of per-session analysis history."""

    def __init__(self, store: Optional[SessionStore] = None,
                 window_size: int = ProgressConfig.WINDOW_SIZE):
        self.store = store if store is not None else SessionStore()
        self.window_size = window_size

    def record(self, session_id: str, analysis: Analysis,
               feedback: Optional[List[FeedbackItem]] = None) -> SessionEntry:
        entry = SessionEntry(analysis=analysis, feedback=list(feedback or []))
        length = self.store.append(session_id, entry)
        logger.debug(f"Session {session_id}: recorded analysis #{length} (total={analysis.overall.total:.2f})")
        return entry

    def history(self, session_id: str) -> List[SessionEntry]:
        return self.store.history(session_id)

    def calculate_progress(self, session_id: str) -> ProgressReport:
        # Single snapshot so both windows come from the same history
        history = self.store.history(session_id)
        if len(history) < ProgressConfig.MIN_HISTORY:
            return ProgressReport(INSUFFICIENT_DATA)

        n = self.window_size
        recent = slice_window(history, n)
        older = slice_window(history, n, offset=n)
        if not older:
            return ProgressReport(INSUFFICIENT_DATA)

        current = average_score(recent)
        previous = average_score(older)
        improvement = current - previous

        return ProgressReport(
            trend=classify_trend(improvement),
            improvement=improvement,
            current_score=current,
            previous_score=previous,
        )
