"""
Feedback module - canned feedback, micro-challenges and recommendations.
"""
from .generator import (
    FeedbackItem,
    MicroChallenge,
    Recommendation,
    generate_feedback,
    generate_micro_challenges,
    create_micro_challenge,
    generate_recommendations,
    generate_student_suggestions,
    generate_challenge_id,
    generate_id
)
from .templates import FEEDBACK_TEMPLATES, CHALLENGE_TEMPLATES, RECOMMENDATION_TEMPLATES

__all__ = [
    'FeedbackItem',
    'MicroChallenge',
    'Recommendation',
    'generate_feedback',
    'generate_micro_challenges',
    'create_micro_challenge',
    'generate_recommendations',
    'generate_student_suggestions',
    'generate_challenge_id',
    'generate_id',
    'FEEDBACK_TEMPLATES',
    'CHALLENGE_TEMPLATES',
    'RECOMMENDATION_TEMPLATES'
]
