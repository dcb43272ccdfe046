"""
Feedback & Challenge Generator - Turns classifier output into learner-facing items.

Produces:
- One feedback item per weakness (template lookup) and one praise item per strength
- One micro-challenge per weakness that has a challenge template
- Recommendations from the raw analysis scores
- Quick suggestions for the student role

All functions are pure apart from the random suffix in challenge ids.
Persisting what they return is the caller's job.
"""
import random
import string
import time
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Optional
import logging

from .templates import (
    FEEDBACK_TEMPLATES,
    STRENGTH_TEMPLATE,
    CHALLENGE_TEMPLATES,
    CHALLENGE_ESTIMATED_TIME,
    RECOMMENDATION_TEMPLATES,
    STUDENT_SUGGESTION_TEMPLATES,
)
from ..scoring.classifier import Weakness, Strength
from ..scoring.text_scorer import Analysis
from config import ClassifierConfig

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class FeedbackItem:
    type: str  # weakness type, or "strength"
    category: str
    message: str
    suggestion: str
    priority: str
    area: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MicroChallenge:
    id: str
    type: str
    category: str
    prompt: str
    skill: str
    hint: str
    criteria: str
    priority: str
    estimated_time: str = CHALLENGE_ESTIMATED_TIME

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Recommendation:
    area: str
    action: str
    priority: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def generate_id(prefix: str) -> str:
    """Millisecond timestamp plus a 9-char base36 suffix."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{prefix}_{int(time.time() * 1000)}_{suffix}"


def generate_challenge_id() -> str:
    return generate_id("challenge")


def generate_feedback(weaknesses: List[Weakness], strengths: List[Strength]) -> List[FeedbackItem]:
    """Weakness feedback first (in classifier order), then praise for strengths."""
    feedback = []

    for weakness in weaknesses:
        template = FEEDBACK_TEMPLATES.get(weakness.type)
        if not template:
            logger.debug(f"No feedback template for {weakness.type}")
            continue
        feedback.append(FeedbackItem(
            type=weakness.type,
            category=weakness.category.value,
            message=template["message"],
            suggestion=template["suggestion"],
            priority=template["priority"],
            area=weakness.area,
            score=weakness.score,
        ))

    for strength in strengths:
        feedback.append(FeedbackItem(
            type="strength",
            category=strength.category.value,
            message=STRENGTH_TEMPLATE["message"].format(area=strength.area, detail=strength.message),
            suggestion=STRENGTH_TEMPLATE["suggestion"],
            priority=STRENGTH_TEMPLATE["priority"],
            area=strength.area,
            score=strength.score,
        ))

    return feedback


def create_micro_challenge(weakness: Weakness,
                           templates: Optional[Dict[str, Dict[str, str]]] = None) -> Optional[MicroChallenge]:
    """Challenge for one weakness, or None when the table has no entry for its type."""
    templates = CHALLENGE_TEMPLATES if templates is None else templates
    template = templates.get(weakness.type)
    if not template:
        return None

    return MicroChallenge(
        id=generate_challenge_id(),
        type=weakness.type,
        category=weakness.category.value,
        prompt=template["prompt"],
        skill=template["skill"],
        hint=template["hint"],
        criteria=template["criteria"],
        priority=weakness.priority,
    )


def generate_micro_challenges(weaknesses: List[Weakness],
                              templates: Optional[Dict[str, Dict[str, str]]] = None) -> List[MicroChallenge]:
    challenges = []
    for weakness in weaknesses:
        challenge = create_micro_challenge(weakness, templates)
        if challenge:
            challenges.append(challenge)
    return challenges


def generate_recommendations(analysis: Analysis) -> List[Recommendation]:
    """Score-driven study recommendations (structure, content, reasoning, evidence)."""
    if analysis.is_empty:
        return []

    triggered = []
    if analysis.structure.coherence < ClassifierConfig.COHERENCE_RECOMMEND_BELOW:
        triggered.append("structure")
    if analysis.content.thesis_clarity < ClassifierConfig.THESIS_WEAK_BELOW:
        triggered.append("content")
    if analysis.reasoning.reasoning_quality < ClassifierConfig.REASONING_WEAK_BELOW:
        triggered.append("reasoning")
    if analysis.evidence.evidence_count < ClassifierConfig.EVIDENCE_WEAK_BELOW:
        triggered.append("evidence")

    return [Recommendation(**RECOMMENDATION_TEMPLATES[key]) for key in triggered]


def generate_student_suggestions(quick_analysis: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Short suggestions shown to the student alongside a quick analysis."""
    suggestions = []

    if not quick_analysis.get("has_thesis"):
        suggestions.append({"type": "thesis", **STUDENT_SUGGESTION_TEMPLATES["thesis"]})

    if quick_analysis.get("evidence_count", 0) < ClassifierConfig.EVIDENCE_WEAK_BELOW:
        suggestions.append({"type": "evidence", **STUDENT_SUGGESTION_TEMPLATES["evidence"]})

    if quick_analysis.get("source_dependency", 0) > ClassifierConfig.SOURCE_DEPENDENCY_WEAK_ABOVE:
        suggestions.append({"type": "originality", **STUDENT_SUGGESTION_TEMPLATES["originality"]})

    return suggestions
