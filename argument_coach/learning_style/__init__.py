"""
Learning-style detection and modality-specific adaptations.
"""
from .detector import (
    Modality,
    ModalityDetection,
    LearningStyleDetector,
    detect_modality,
    MODALITY_PRIORITY
)
from .adaptation import (
    AdaptationBundle,
    select_adaptations,
    default_adaptations,
    complementary_modalities,
    ADAPTATIONS_BY_MODALITY
)

__all__ = [
    'Modality',
    'ModalityDetection',
    'LearningStyleDetector',
    'detect_modality',
    'MODALITY_PRIORITY',
    'AdaptationBundle',
    'select_adaptations',
    'default_adaptations',
    'complementary_modalities',
    'ADAPTATIONS_BY_MODALITY'
]
