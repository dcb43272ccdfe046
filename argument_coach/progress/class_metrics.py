"""
Class metrics - Activity-based progress across a class roster.

Per-student progress is how active the student was in the last week:
min(interactions in RECENT_DAYS / FULL_ACTIVITY_INTERACTIONS, 1).
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Iterable, List, Optional
import logging

import numpy as np

from ..persistence.interactions import InteractionRepository
from config import ClassMetricsConfig

logger = logging.getLogger(__name__)

STUDENT_ROLE = "Estudiante"


@dataclass
class ClassMetrics:
    class_id: str
    total_students: int = 0
    average_progress: float = 0.0
    distribution: Dict[str, int] = field(
        default_factory=lambda: {"improving": 0, "stable": 0, "declining": 0}
    )
    top_performers: List[Dict[str, Any]] = field(default_factory=list)
    needs_attention: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_id": self.class_id,
            "total_students": self.total_students,
            "average_progress": self.average_progress,
            "distribution": dict(self.distribution),
            "top_performers": list(self.top_performers),
            "needs_attention": list(self.needs_attention),
        }


def _display_name(student_id: str) -> str:
    return f"Estudiante {student_id[-4:]}"


def activity_progress(timestamps: Iterable[datetime], now: datetime) -> float:
    cutoff = now - timedelta(days=ClassMetricsConfig.RECENT_DAYS)
    recent = sum(1 for ts in timestamps if ts >= cutoff)
    return min(recent / ClassMetricsConfig.FULL_ACTIVITY_INTERACTIONS, 1.0)


def calculate_class_metrics(class_id: str, student_ids: Iterable[str],
                            repository: InteractionRepository,
                            now: Optional[datetime] = None) -> ClassMetrics:
    """Aggregate activity progress for the students of one class."""
    now = now or datetime.now(timezone.utc)
    metrics = ClassMetrics(class_id=class_id)

    progress_by_student: Dict[str, float] = {}
    for student_id in student_ids:
        interactions = [
            i for i in repository.read_recent_interactions(
                student_id, limit=ClassMetricsConfig.INTERACTION_FETCH_LIMIT
            )
            if i.role == STUDENT_ROLE
        ]
        # Students with no interactions are not counted as class members here
        if not interactions:
            continue
        progress_by_student[student_id] = activity_progress(
            (i.timestamp for i in interactions), now
        )

    if not progress_by_student:
        logger.info(f"Class {class_id}: no student interactions found")
        return metrics

    values = list(progress_by_student.values())
    metrics.total_students = len(values)
    metrics.average_progress = float(np.mean(values))

    for progress in values:
        if progress > ClassMetricsConfig.IMPROVING_ABOVE:
            metrics.distribution["improving"] += 1
        elif progress > ClassMetricsConfig.STABLE_ABOVE:
            metrics.distribution["stable"] += 1
        else:
            metrics.distribution["declining"] += 1

    ranked = sorted(progress_by_student.items(), key=lambda kv: kv[1], reverse=True)
    metrics.top_performers = [
        {"student_id": sid, "name": _display_name(sid), "progress": progress}
        for sid, progress in ranked[:ClassMetricsConfig.TOP_PERFORMERS]
    ]
    metrics.needs_attention = [
        {"student_id": sid, "name": _display_name(sid), "issues": ["Bajo progreso", "Pocas interacciones"]}
        for sid, progress in progress_by_student.items()
        if progress < ClassMetricsConfig.NEEDS_ATTENTION_BELOW
    ]

    logger.info(
        f"Class {class_id}: {metrics.total_students} students, "
        f"avg progress {metrics.average_progress:.2f}"
    )
    return metrics


def student_activity_summary(student_id: str, repository: InteractionRepository) -> Dict[str, Any]:
    """Recent activity for one student, as shown next to session progress."""
    interactions = repository.read_recent_interactions(
        student_id, limit=ClassMetricsConfig.SUMMARY_LIMIT
    )
    return {
        "total_interactions": len(interactions),
        "recent_activity": [i.to_dict() for i in interactions[:ClassMetricsConfig.SUMMARY_RECENT]],
        "learning_style": interactions[0].modality if interactions else None,
    }
