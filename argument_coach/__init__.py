"""
Argument Coach - Argument-quality analysis and adaptive feedback.

Scores Spanish-language submissions on six rhetorical dimensions, turns
weak scores into feedback and micro-challenges, infers a learning
modality from lexical cues and tracks score trends per session.
"""
from typing import Dict, Any, Optional

from .errors import ArgumentCoachError, EmptySubmissionError, UnknownAgentError, PersistenceError
from .scoring import TextScorer, Analysis, score_text, classify
from .learning_style import Modality, detect_modality, select_adaptations
from .progress import ProgressTracker, SessionStore
from .persistence import InMemoryInteractionRepository, InteractionRepository
from .agents import AgentRouter, CritiqueAgent, create_agent_system

__version__ = "0.1.0"


def analyze(text: str, context: Optional[Dict[str, Any]] = None,
            tracker: Optional[ProgressTracker] = None) -> Dict[str, Any]:
    """
    Full analysis of one submission.

    Args:
        text: Submission text (empty text scores zero on every dimension)
        context: Optional session context; its "session_id" selects the history
        tracker: Session history to record into; a fresh one when omitted

    Returns:
        Dict with analysis, weaknesses, strengths, feedback, micro_challenges,
        recommendations and progress
    """
    session_id = (context or {}).get("session_id", "default")
    agent = CritiqueAgent(tracker=tracker)
    return agent.analyze(text or "", session_id=session_id).to_dict()


__all__ = [
    'analyze',
    'detect_modality',
    'create_agent_system',
    'score_text',
    'classify',
    'select_adaptations',
    'TextScorer',
    'Analysis',
    'Modality',
    'ProgressTracker',
    'SessionStore',
    'AgentRouter',
    'CritiqueAgent',
    'InteractionRepository',
    'InMemoryInteractionRepository',
    'ArgumentCoachError',
    'EmptySubmissionError',
    'UnknownAgentError',
    'PersistenceError',
]
