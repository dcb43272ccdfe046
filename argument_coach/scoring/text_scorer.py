"""
Text Scorer - Lexical scoring of an argumentative submission.

Scores six dimensions from indicator counts:
- Structure (introduction/conclusion markers, coherence, organization)
- Content (thesis, depth, breadth)
- Reasoning (logical connectors vs. absolutist wording)
- Evidence (statistics, examples, quotes, references)
- Critical thinking (questioning, analysis, evaluation, synthesis, metacognition)
- Originality (personal insight and creative framing vs. source dependency)

Every normalized metric is min(count / divisor, 1). Scoring is deterministic
and does no I/O; the same text always yields the same Analysis.
"""
import re
import time
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional, Tuple, Union
import logging

import numpy as np

from ..indicators import lexicon
from ..indicators.lexicon import count_indicator_hits, contains_any
from config import ScoringConfig

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r'[.!?]+')


def _normalize(count: float, divisor: float) -> float:
    return float(min(count / divisor, 1.0))


def _clamp(value: float) -> float:
    return float(np.clip(value, 0.0, 1.0))


@dataclass(frozen=True)
class Submission:
    """A learner's text as received. Immutable once scored."""
    text: str
    session_id: str = "default"
    student_id: Optional[str] = None
    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class StructureMetrics:
    has_introduction: bool
    has_body: bool
    has_conclusion: bool
    sentence_count: int
    average_sentence_length: float
    coherence: float
    organization: float


@dataclass(frozen=True)
class ContentMetrics:
    has_thesis: bool
    thesis_clarity: float
    topic_relevance: float
    depth: float
    breadth: float


@dataclass(frozen=True)
class ReasoningMetrics:
    logical_connections: int
    argument_flow: float
    consistency: float
    fallacies: int
    reasoning_quality: float


@dataclass(frozen=True)
class EvidenceMetrics:
    evidence_count: int
    evidence_types: Tuple[str, ...]
    evidence_details: Dict[str, int]
    evidence_quality: float
    source_dependency: float
    evidence_relevance: float


@dataclass(frozen=True)
class CriticalThinkingMetrics:
    questioning: int
    analysis: int
    evaluation: int
    synthesis: int
    metacognition: int
    overall_level: float


@dataclass(frozen=True)
class OriginalityMetrics:
    source_dependency: float
    personal_insights: int
    creative_elements: int
    originality_score: float


@dataclass(frozen=True)
class OverallScores:
    """Per-dimension summary; total is the mean of the six dimensions."""
    structure: float
    content: float
    reasoning: float
    evidence: float
    critical_thinking: float
    originality: float
    total: float


@dataclass(frozen=True)
class Analysis:
    """Six-dimension analysis of one submission."""
    structure: StructureMetrics
    content: ContentMetrics
    reasoning: ReasoningMetrics
    evidence: EvidenceMetrics
    critical_thinking: CriticalThinkingMetrics
    originality: OriginalityMetrics
    overall: OverallScores
    is_empty: bool = False

    def normalized_scores(self) -> Dict[str, float]:
        """All [0,1] metrics, flattened as 'dimension.metric'."""
        return {
            "structure.coherence": self.structure.coherence,
            "structure.organization": self.structure.organization,
            "content.thesis_clarity": self.content.thesis_clarity,
            "content.topic_relevance": self.content.topic_relevance,
            "content.depth": self.content.depth,
            "content.breadth": self.content.breadth,
            "reasoning.argument_flow": self.reasoning.argument_flow,
            "reasoning.consistency": self.reasoning.consistency,
            "reasoning.reasoning_quality": self.reasoning.reasoning_quality,
            "evidence.evidence_quality": self.evidence.evidence_quality,
            "evidence.source_dependency": self.evidence.source_dependency,
            "evidence.evidence_relevance": self.evidence.evidence_relevance,
            "critical_thinking.overall_level": self.critical_thinking.overall_level,
            "originality.source_dependency": self.originality.source_dependency,
            "originality.originality_score": self.originality.originality_score,
            "overall.structure": self.overall.structure,
            "overall.content": self.overall.content,
            "overall.reasoning": self.overall.reasoning,
            "overall.evidence": self.overall.evidence,
            "overall.critical_thinking": self.overall.critical_thinking,
            "overall.originality": self.overall.originality,
            "overall.total": self.overall.total,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["evidence"]["evidence_types"] = list(self.evidence.evidence_types)
        return data


class TextScorer:
    """Computes an Analysis from raw text using the indicator tables."""

    def score(self, submission: Union[str, Submission]) -> Analysis:
        """Score raw text or a Submission (only its text is scored)."""
        text = submission.text if isinstance(submission, Submission) else submission
        text = text or ""
        is_empty = not text.strip()

        structure = self.analyze_structure(text)
        content = self.analyze_content(text, is_empty)
        reasoning = self.analyze_reasoning(text, is_empty)
        evidence = self.analyze_evidence(text, is_empty)
        critical = self.analyze_critical_thinking(text)
        originality = self.analyze_originality(text)

        overall = self.calculate_overall_scores(
            structure, content, reasoning, evidence, critical, originality
        )

        logger.debug(
            f"Scored {len(text)} chars: total={overall.total:.2f} "
            f"evidence={evidence.evidence_count} fallacies={reasoning.fallacies}"
        )

        return Analysis(
            structure=structure,
            content=content,
            reasoning=reasoning,
            evidence=evidence,
            critical_thinking=critical,
            originality=originality,
            overall=overall,
            is_empty=is_empty,
        )

    # ── Dimensions ──────────────────────────────────────────────────────────

    def analyze_structure(self, text: str) -> StructureMetrics:
        sentences = [s.strip() for s in SENTENCE_SPLIT.split(text) if s.strip()]
        avg_length = (sum(len(s) for s in sentences) / len(sentences)) if sentences else 0.0

        return StructureMetrics(
            has_introduction=contains_any(text, lexicon.INTRODUCTION_INDICATORS),
            has_body=len(text) > ScoringConfig.BODY_MIN_CHARS,
            has_conclusion=contains_any(text, lexicon.CONCLUSION_INDICATORS),
            sentence_count=len(sentences),
            average_sentence_length=float(avg_length),
            coherence=_normalize(
                count_indicator_hits(text, lexicon.COHERENCE_INDICATORS),
                ScoringConfig.COHERENCE_DIVISOR,
            ),
            organization=_normalize(
                count_indicator_hits(text, lexicon.ORGANIZATION_INDICATORS),
                ScoringConfig.ORGANIZATION_DIVISOR,
            ),
        )

    def analyze_content(self, text: str, is_empty: bool = False) -> ContentMetrics:
        has_thesis = self.detect_thesis(text)
        if is_empty:
            clarity = 0.0
        elif has_thesis:
            clarity = ScoringConfig.THESIS_PRESENT_CLARITY
        else:
            clarity = ScoringConfig.THESIS_ABSENT_CLARITY

        return ContentMetrics(
            has_thesis=has_thesis,
            thesis_clarity=clarity,
            topic_relevance=0.0 if is_empty else ScoringConfig.TOPIC_RELEVANCE,
            depth=_normalize(
                count_indicator_hits(text, lexicon.DEPTH_INDICATORS),
                ScoringConfig.DEPTH_DIVISOR,
            ),
            breadth=_normalize(
                count_indicator_hits(text, lexicon.BREADTH_INDICATORS),
                ScoringConfig.BREADTH_DIVISOR,
            ),
        )

    def analyze_reasoning(self, text: str, is_empty: bool = False) -> ReasoningMetrics:
        connections = count_indicator_hits(text, lexicon.LOGICAL_CONNECTION_INDICATORS)
        fallacies = count_indicator_hits(text, lexicon.FALLACY_INDICATORS)

        return ReasoningMetrics(
            logical_connections=connections,
            argument_flow=_normalize(connections, ScoringConfig.ARGUMENT_FLOW_DIVISOR),
            consistency=0.0 if is_empty else ScoringConfig.CONSISTENCY,
            fallacies=fallacies,
            reasoning_quality=_clamp((connections - fallacies) / ScoringConfig.REASONING_DIVISOR),
        )

    def analyze_evidence(self, text: str, is_empty: bool = False) -> EvidenceMetrics:
        details = self.extract_evidence_indicators(text)
        count = sum(details.values())

        return EvidenceMetrics(
            evidence_count=count,
            evidence_types=tuple(details.keys()),
            evidence_details=details,
            evidence_quality=_normalize(count, ScoringConfig.EVIDENCE_QUALITY_DIVISOR),
            source_dependency=self.source_dependency(text),
            evidence_relevance=0.0 if is_empty else ScoringConfig.EVIDENCE_RELEVANCE,
        )

    def analyze_critical_thinking(self, text: str) -> CriticalThinkingMetrics:
        questioning = count_indicator_hits(text, lexicon.QUESTIONING_INDICATORS)
        analysis = count_indicator_hits(text, lexicon.ANALYSIS_INDICATORS)
        evaluation = count_indicator_hits(text, lexicon.EVALUATION_INDICATORS)
        synthesis = count_indicator_hits(text, lexicon.SYNTHESIS_INDICATORS)
        metacognition = count_indicator_hits(text, lexicon.METACOGNITION_INDICATORS)

        total = questioning + analysis + evaluation + synthesis + metacognition

        return CriticalThinkingMetrics(
            questioning=questioning,
            analysis=analysis,
            evaluation=evaluation,
            synthesis=synthesis,
            metacognition=metacognition,
            overall_level=_normalize(total, ScoringConfig.CRITICAL_THINKING_DIVISOR),
        )

    def analyze_originality(self, text: str) -> OriginalityMetrics:
        dependency = self.source_dependency(text)
        personal = count_indicator_hits(text, lexicon.PERSONAL_INSIGHT_INDICATORS)
        creative = count_indicator_hits(text, lexicon.CREATIVE_INDICATORS)

        # Insight term is clamped first so heavy source use always caps the score
        insight = _normalize(personal + creative, ScoringConfig.ORIGINALITY_DIVISOR)

        return OriginalityMetrics(
            source_dependency=dependency,
            personal_insights=personal,
            creative_elements=creative,
            originality_score=_clamp(insight - dependency),
        )

    # ── Shared helpers ──────────────────────────────────────────────────────

    @staticmethod
    def detect_thesis(text: str) -> bool:
        return contains_any(text, lexicon.THESIS_INDICATORS)

    @staticmethod
    def extract_evidence_indicators(text: str) -> Dict[str, int]:
        """Hit counts per evidence kind, only kinds with at least one hit."""
        details = {}
        for kind, indicators in lexicon.EVIDENCE_INDICATORS.items():
            count = count_indicator_hits(text, indicators)
            if count > 0:
                details[kind] = count
        return details

    @staticmethod
    def source_dependency(text: str) -> float:
        return _normalize(
            count_indicator_hits(text, lexicon.SOURCE_INDICATORS),
            ScoringConfig.SOURCE_DEPENDENCY_DIVISOR,
        )

    @staticmethod
    def calculate_overall_scores(
        structure: StructureMetrics,
        content: ContentMetrics,
        reasoning: ReasoningMetrics,
        evidence: EvidenceMetrics,
        critical: CriticalThinkingMetrics,
        originality: OriginalityMetrics,
    ) -> OverallScores:
        dimensions = {
            "structure": float(np.mean([structure.coherence, structure.organization])),
            "content": float(np.mean([content.thesis_clarity, content.depth, content.breadth])),
            "reasoning": reasoning.reasoning_quality,
            "evidence": float(np.mean([evidence.evidence_quality, evidence.evidence_relevance])),
            "critical_thinking": critical.overall_level,
            "originality": originality.originality_score,
        }
        total = _clamp(float(np.mean(list(dimensions.values()))))
        return OverallScores(total=total, **dimensions)


def score_text(text: str) -> Analysis:
    """Score a single text with a default TextScorer."""
    return TextScorer().score(text)
