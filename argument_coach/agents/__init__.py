"""
Agents Module - Four role agents behind one router.

Architecture:
┌──────────────────────────────────────────────────────────────────┐
│                          AGENT ROUTER                            │
│          message log per session  •  versioned context           │
│                                                                  │
│  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐  │
│  │  STUDENT   │  │  TEACHER   │  │  CRITIQUE  │  │  ANALYSIS  │  │
│  │   AGENT    │  │   AGENT    │  │   AGENT    │  │   AGENT    │  │
│  │            │  │            │  │            │  │            │  │
│  │ • Quick    │  │ • Activity │  │ • Scores   │  │ • Cognitive│  │
│  │   check    │  │ • Adapt to │  │ • Feedback │  │   level    │  │
│  │ • Learning │  │   learning │  │ • Micro-   │  │ • Metrics  │  │
│  │   style    │  │   style    │  │   challenge│  │ • Progress │  │
│  └────────────┘  └────────────┘  └─────┬──────┘  └─────┬──────┘  │
│                                        └── Progress ───┘         │
│                                            Tracker               │
└──────────────────────────────────────────────────────────────────┘
"""

import logging
from typing import Optional

from .core import (
    AgentRole,
    AgentContext,
    AgentMessage,
    AgentRouter,
    MessageStatus,
    BaseAgent,
    BaseTool,
    ToolResult,
    AGENT_ID_ALIASES
)

from .student_agent import (
    StudentAgent,
    QuickAnalysisTool,
    DetectLearningStyleTool,
    RecordInteractionTool
)

from .teacher_agent import (
    TeacherAgent,
    LearningStyleLookupTool,
    InclusiveActivityTool,
    AdaptationTool,
    parse_activity_request
)

from .critique_agent import (
    CritiqueAgent,
    ArgumentReport,
    ScoreTextTool,
    ClassifyAnalysisTool,
    FeedbackGeneratorTool,
    MicroChallengeTool,
    RecommendationTool,
    ProgressTrackerTool,
    extract_text
)

from .analysis_agent import (
    AnalysisAgent,
    DeepAnalysisTool,
    MetricsTool,
    cognitive_level
)

from ..persistence.interactions import InteractionRepository
from ..progress.session_store import SessionStore
from ..progress.tracker import ProgressTracker
from ..utils.logger import setup_logging


def create_agent_system(
    repository: Optional[InteractionRepository] = None,
    tracker: Optional[ProgressTracker] = None,
    message_log: Optional[SessionStore] = None,
    verbose: bool = False
) -> AgentRouter:
    """
    Factory function to create the complete four-agent system.

    Args:
        repository: Optional interaction repository (student and teacher agents)
        tracker: Optional progress tracker, shared by critique and analysis agents
        message_log: Optional store for routed messages
        verbose: Enable verbose logging (also configures DEBUG output for the package)

    Returns:
        Configured AgentRouter
    """
    if verbose:
        setup_logging(logging.DEBUG)

    tracker = tracker if tracker is not None else ProgressTracker()

    agents = [
        StudentAgent(repository, verbose),
        TeacherAgent(repository, verbose),
        CritiqueAgent(tracker, verbose),
        AnalysisAgent(tracker, verbose),
    ]

    return AgentRouter(agents, message_log=message_log, verbose=verbose)


__all__ = [
    # Core
    'AgentRole',
    'AgentContext',
    'AgentMessage',
    'AgentRouter',
    'MessageStatus',
    'BaseAgent',
    'BaseTool',
    'ToolResult',
    'AGENT_ID_ALIASES',

    # Agents
    'StudentAgent',
    'TeacherAgent',
    'CritiqueAgent',
    'AnalysisAgent',
    'ArgumentReport',

    # Student Tools
    'QuickAnalysisTool',
    'DetectLearningStyleTool',
    'RecordInteractionTool',

    # Teacher Tools
    'LearningStyleLookupTool',
    'InclusiveActivityTool',
    'AdaptationTool',
    'parse_activity_request',

    # Critique Tools
    'ScoreTextTool',
    'ClassifyAnalysisTool',
    'FeedbackGeneratorTool',
    'MicroChallengeTool',
    'RecommendationTool',
    'ProgressTrackerTool',
    'extract_text',

    # Analysis Tools
    'DeepAnalysisTool',
    'MetricsTool',
    'cognitive_level',

    # Factory
    'create_agent_system'
]
