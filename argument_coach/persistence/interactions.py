"""
Interaction Repository - Persistence collaborator for interactions and learning styles.

The engine only depends on the InteractionRepository protocol. The in-memory
implementation backs tests and local runs; a database-backed one plugs in
behind the same four methods.
"""
import threading
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional, Protocol
import logging

from ..errors import PersistenceError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class InteractionRecord:
    student_id: str
    role: str  # e.g. "Estudiante", "AgenteIA"
    message: str
    modality: Optional[str] = None
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


@dataclass(frozen=True)
class LearningStyleProfile:
    student_id: str
    modality: str
    strengths: str = ""
    weaknesses: str = "Por determinar"
    confidence: Optional[float] = None
    updated_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["updated_at"] = self.updated_at.isoformat()
        return data


class InteractionRepository(Protocol):
    def record_interaction(self, student_id: str, role: str, message: str,
                           modality: Optional[str] = None) -> InteractionRecord: ...

    def read_recent_interactions(self, student_id: str, limit: int = 10) -> List[InteractionRecord]: ...

    def save_learning_style(self, student_id: str, modality: str, strengths: str = "",
                            weaknesses: str = "Por determinar",
                            confidence: Optional[float] = None) -> LearningStyleProfile: ...

    def get_learning_style(self, student_id: str) -> Optional[LearningStyleProfile]: ...


class InMemoryInteractionRepository:
    """Process-local repository. Newest interactions are returned first."""

    def __init__(self):
        self._interactions: Dict[str, List[InteractionRecord]] = {}
        self._profiles: Dict[str, LearningStyleProfile] = {}
        self._lock = threading.Lock()

    def record_interaction(self, student_id: str, role: str, message: str,
                           modality: Optional[str] = None,
                           timestamp: Optional[datetime] = None) -> InteractionRecord:
        if not student_id:
            raise PersistenceError("student_id is required to record an interaction")
        record = InteractionRecord(
            student_id=student_id,
            role=role,
            message=message,
            modality=modality,
            timestamp=timestamp or _utcnow(),
        )
        with self._lock:
            self._interactions.setdefault(student_id, []).append(record)
        return record

    def read_recent_interactions(self, student_id: str, limit: int = 10) -> List[InteractionRecord]:
        with self._lock:
            records = list(self._interactions.get(student_id, []))
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records[:limit]

    def save_learning_style(self, student_id: str, modality: str, strengths: str = "",
                            weaknesses: str = "Por determinar",
                            confidence: Optional[float] = None) -> LearningStyleProfile:
        if not student_id:
            raise PersistenceError("student_id is required to store a learning style")
        profile = LearningStyleProfile(
            student_id=student_id,
            modality=modality,
            strengths=strengths or f"Detectado automáticamente: {modality}",
            weaknesses=weaknesses,
            confidence=confidence,
        )
        # Upsert on student_id
        with self._lock:
            self._profiles[student_id] = profile
        logger.info(f"Learning style {modality} stored for student {student_id}")
        return profile

    def get_learning_style(self, student_id: str) -> Optional[LearningStyleProfile]:
        if not student_id:
            return None
        with self._lock:
            return self._profiles.get(student_id)
