"""
Scoring module - lexical text scoring and threshold classification.
"""
from .text_scorer import (
    TextScorer,
    Submission,
    Analysis,
    StructureMetrics,
    ContentMetrics,
    ReasoningMetrics,
    EvidenceMetrics,
    CriticalThinkingMetrics,
    OriginalityMetrics,
    OverallScores,
    score_text
)
from .classifier import (
    WeaknessCategory,
    Weakness,
    Strength,
    identify_weaknesses,
    identify_strengths,
    classify,
    WEAKNESS_TYPES
)

__all__ = [
    'TextScorer',
    'Submission',
    'Analysis',
    'StructureMetrics',
    'ContentMetrics',
    'ReasoningMetrics',
    'EvidenceMetrics',
    'CriticalThinkingMetrics',
    'OriginalityMetrics',
    'OverallScores',
    'score_text',
    'WeaknessCategory',
    'Weakness',
    'Strength',
    'identify_weaknesses',
    'identify_strengths',
    'classify',
    'WEAKNESS_TYPES'
]
