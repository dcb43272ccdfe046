"""
Indicator tables and the shared hit counter.
"""
from .lexicon import (
    count_indicator_hits,
    contains_any,
    EVIDENCE_INDICATORS,
    MODALITY_INDICATORS,
    SOURCE_INDICATORS,
    THESIS_INDICATORS,
)

__all__ = [
    'count_indicator_hits',
    'contains_any',
    'EVIDENCE_INDICATORS',
    'MODALITY_INDICATORS',
    'SOURCE_INDICATORS',
    'THESIS_INDICATORS',
]
