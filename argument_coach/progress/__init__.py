"""
Progress module - per-session history, trends and class-level activity metrics.
"""
from .session_store import SessionStore, slice_window
from .tracker import (
    ProgressTracker,
    ProgressReport,
    SessionEntry,
    classify_trend,
    INSUFFICIENT_DATA,
    IMPROVING,
    STABLE,
    DECLINING
)
from .class_metrics import ClassMetrics, calculate_class_metrics, student_activity_summary

__all__ = [
    'slice_window',
    'SessionStore',
    'ProgressTracker',
    'ProgressReport',
    'SessionEntry',
    'classify_trend',
    'INSUFFICIENT_DATA',
    'IMPROVING',
    'STABLE',
    'DECLINING',
    'ClassMetrics',
    'calculate_class_metrics',
    'student_activity_summary'
]
