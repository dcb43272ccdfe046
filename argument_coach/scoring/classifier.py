"""
Weakness/Strength Classifier - Fixed threshold rules over an Analysis.

Every rule is evaluated on every call; there is no short-circuit. Weak and
strong bands never overlap, so a category is at most one of the two.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, List, Tuple
import logging

from .text_scorer import Analysis
from config import ClassifierConfig, ScoringConfig

logger = logging.getLogger(__name__)


class WeaknessCategory(Enum):
    THESIS = "thesis"
    EVIDENCE = "evidence"
    ORIGINALITY = "originality"
    REASONING = "reasoning"
    CRITICAL_THINKING = "critical_thinking"


# Template key used by the feedback/challenge tables, per category
WEAKNESS_TYPES = {
    WeaknessCategory.THESIS: "thesis_weak",
    WeaknessCategory.EVIDENCE: "evidence_lacking",
    WeaknessCategory.ORIGINALITY: "source_dependency",
    WeaknessCategory.REASONING: "reasoning_weak",
    WeaknessCategory.CRITICAL_THINKING: "critical_thinking_low",
}

AREA_LABELS = {
    WeaknessCategory.THESIS: "Tesis",
    WeaknessCategory.EVIDENCE: "Evidencia",
    WeaknessCategory.ORIGINALITY: "Originalidad",
    WeaknessCategory.REASONING: "Razonamiento",
    WeaknessCategory.CRITICAL_THINKING: "Pensamiento Crítico",
}

STRENGTH_MESSAGES = {
    WeaknessCategory.THESIS: "Tu tesis está bien definida y clara",
    WeaknessCategory.EVIDENCE: "Incluyes buena cantidad de evidencia para respaldar tu argumento",
    WeaknessCategory.ORIGINALITY: "Tu análisis muestra pensamiento original y personal",
    WeaknessCategory.REASONING: "Tu razonamiento es lógico y bien estructurado",
}


@dataclass(frozen=True)
class Weakness:
    category: WeaknessCategory
    area: str
    score: float
    priority: str  # high | medium | low

    @property
    def type(self) -> str:
        return WEAKNESS_TYPES[self.category]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "category": self.category.value,
            "area": self.area,
            "score": self.score,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class Strength:
    category: WeaknessCategory
    area: str
    score: float
    message: str
    priority: str = "low"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "area": self.area,
            "score": self.score,
            "message": self.message,
            "priority": self.priority,
        }


def identify_weaknesses(analysis: Analysis) -> List[Weakness]:
    """Weaknesses in rule-table order: thesis, evidence, originality, reasoning, critical thinking."""
    if analysis.is_empty:
        return []

    weaknesses = []
    clarity = analysis.content.thesis_clarity
    evidence_count = analysis.evidence.evidence_count
    dependency = analysis.originality.source_dependency
    reasoning = analysis.reasoning.reasoning_quality
    critical = analysis.critical_thinking.overall_level

    if clarity < ClassifierConfig.THESIS_WEAK_BELOW:
        weaknesses.append(_weakness(WeaknessCategory.THESIS, clarity, "high"))

    if evidence_count < ClassifierConfig.EVIDENCE_WEAK_BELOW:
        weaknesses.append(_weakness(
            WeaknessCategory.EVIDENCE,
            evidence_count / ScoringConfig.EVIDENCE_QUALITY_DIVISOR,
            "medium",
        ))

    if dependency > ClassifierConfig.SOURCE_DEPENDENCY_WEAK_ABOVE:
        weaknesses.append(_weakness(WeaknessCategory.ORIGINALITY, 1 - dependency, "high"))

    if reasoning < ClassifierConfig.REASONING_WEAK_BELOW:
        weaknesses.append(_weakness(WeaknessCategory.REASONING, reasoning, "medium"))

    if critical < ClassifierConfig.CRITICAL_THINKING_WEAK_BELOW:
        weaknesses.append(_weakness(WeaknessCategory.CRITICAL_THINKING, critical, "high"))

    return weaknesses


def identify_strengths(analysis: Analysis) -> List[Strength]:
    if analysis.is_empty:
        return []

    strengths = []
    clarity = analysis.content.thesis_clarity
    evidence_count = analysis.evidence.evidence_count
    originality = analysis.originality.originality_score
    reasoning = analysis.reasoning.reasoning_quality

    if clarity > ClassifierConfig.THESIS_STRONG_ABOVE:
        strengths.append(_strength(WeaknessCategory.THESIS, clarity))

    if evidence_count >= ClassifierConfig.EVIDENCE_STRONG_AT_LEAST:
        strengths.append(_strength(
            WeaknessCategory.EVIDENCE,
            min(evidence_count / ScoringConfig.EVIDENCE_QUALITY_DIVISOR, 1.0),
        ))

    if originality > ClassifierConfig.ORIGINALITY_STRONG_ABOVE:
        strengths.append(_strength(WeaknessCategory.ORIGINALITY, originality))

    if reasoning > ClassifierConfig.REASONING_STRONG_ABOVE:
        strengths.append(_strength(WeaknessCategory.REASONING, reasoning))

    return strengths


def classify(analysis: Analysis) -> Tuple[List[Weakness], List[Strength]]:
    weaknesses = identify_weaknesses(analysis)
    strengths = identify_strengths(analysis)
    logger.debug(
        f"Classified: weaknesses={[w.type for w in weaknesses]} "
        f"strengths={[s.category.value for s in strengths]}"
    )
    return weaknesses, strengths


def _weakness(category: WeaknessCategory, score: float, priority: str) -> Weakness:
    return Weakness(category=category, area=AREA_LABELS[category], score=score, priority=priority)


def _strength(category: WeaknessCategory, score: float) -> Strength:
    return Strength(
        category=category,
        area=AREA_LABELS[category],
        score=score,
        message=STRENGTH_MESSAGES[category],
    )
