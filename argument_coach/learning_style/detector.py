"""
Learning-Style Detector - Infers a dominant learning modality from lexical cues.

Each modality has a fixed keyword list. The modality with the most hits wins,
but only when it reaches MIN_DOMINANT_COUNT hits; weaker signals are reported
as UNDETERMINED. Ties go to the earlier modality in MODALITY_PRIORITY.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional
import logging

from ..indicators.lexicon import MODALITY_INDICATORS, count_indicator_hits
from config import LearningStyleConfig

logger = logging.getLogger(__name__)


class Modality(Enum):
    VISUAL = "visual"
    AUDITORY = "auditory"
    READING = "reading"
    KINESTHETIC = "kinesthetic"
    UNDETERMINED = "undetermined"

    @classmethod
    def parse(cls, value: Any) -> "Modality":
        """Lenient parse of stored values ('visual', 'VISUAL', Modality, None)."""
        if isinstance(value, Modality):
            return value
        if not value:
            return cls.UNDETERMINED
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNDETERMINED


# Tie-break order: first listed wins
MODALITY_PRIORITY = (
    Modality.VISUAL,
    Modality.AUDITORY,
    Modality.READING,
    Modality.KINESTHETIC,
)


@dataclass(frozen=True)
class ModalityDetection:
    modality: Modality
    scores: Dict[str, int] = field(default_factory=dict)
    confidence: float = 0.0  # winner's share of all hits

    @property
    def detected(self) -> bool:
        return self.modality is not Modality.UNDETERMINED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modality": self.modality.value,
            "scores": dict(self.scores),
            "confidence": self.confidence,
        }


class LearningStyleDetector:
    """Scores a message against the four modality keyword sets."""

    def __init__(self, min_dominant_count: int = LearningStyleConfig.MIN_DOMINANT_COUNT):
        self.min_dominant_count = min_dominant_count

    def score(self, message: str) -> Dict[str, int]:
        return {
            modality.value: count_indicator_hits(message, MODALITY_INDICATORS[modality.value])
            for modality in MODALITY_PRIORITY
        }

    def detect(self, message: str, context: Optional[Dict[str, Any]] = None) -> ModalityDetection:
        scores = self.score(message or "")

        winner = MODALITY_PRIORITY[0]
        for modality in MODALITY_PRIORITY[1:]:
            if scores[modality.value] > scores[winner.value]:
                winner = modality

        best = scores[winner.value]
        total = sum(scores.values())

        if best < self.min_dominant_count:
            logger.debug(f"No clear learning style (max hits {best}): {scores}")
            return ModalityDetection(Modality.UNDETERMINED, scores, 0.0)

        confidence = best / total if total else 0.0
        logger.debug(f"Detected learning style {winner.value} ({confidence:.2f}): {scores}")
        return ModalityDetection(winner, scores, confidence)


def detect_modality(message: str) -> Modality:
    """Dominant modality of a message, or Modality.UNDETERMINED."""
    return LearningStyleDetector().detect(message).modality
