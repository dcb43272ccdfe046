"""
Critique Agent - Full Argument Analysis and Feedback

Chains the scoring pipeline for one submission:
- Scores the six rhetorical dimensions
- Flags weaknesses and strengths
- Builds feedback, micro-challenges and recommendations
- Records the analysis in the session history and reports the trend
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
import logging

from .core import BaseAgent, BaseTool, AgentContext, AgentRole, ToolResult
from ..errors import EmptySubmissionError
from ..feedback.generator import (
    FeedbackItem,
    MicroChallenge,
    Recommendation,
    generate_feedback,
    generate_micro_challenges,
    generate_recommendations,
)
from ..progress.tracker import ProgressTracker, ProgressReport
from ..scoring.classifier import Weakness, Strength, classify
from ..scoring.text_scorer import Analysis, Submission, TextScorer
from ..utils.logger import create_logger

logger = logging.getLogger(__name__)


@dataclass
class ArgumentReport:
    """Composite result of analyzing one submission."""
    analysis: Analysis
    weaknesses: List[Weakness] = field(default_factory=list)
    strengths: List[Strength] = field(default_factory=list)
    feedback: List[FeedbackItem] = field(default_factory=list)
    micro_challenges: List[MicroChallenge] = field(default_factory=list)
    recommendations: List[Recommendation] = field(default_factory=list)
    progress: Optional[ProgressReport] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "analysis": self.analysis.to_dict(),
            "weaknesses": [w.to_dict() for w in self.weaknesses],
            "strengths": [s.to_dict() for s in self.strengths],
            "feedback": [f.to_dict() for f in self.feedback],
            "micro_challenges": [c.to_dict() for c in self.micro_challenges],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "progress": self.progress.to_dict() if self.progress else None,
        }


def extract_text(payload: Any) -> str:
    """Pull submission text out of a string or dict payload."""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        for key in ("text", "student_text", "message"):
            value = payload.get(key)
            if isinstance(value, str):
                return value
    return ""


class ScoreTextTool(BaseTool):
    """Scores a text on the six argument dimensions."""
    name = "score_text"
    description = "Score structure, content, reasoning, evidence, critical thinking and originality"

    def __init__(self, scorer: TextScorer):
        self.scorer = scorer

    def execute(self, _context: AgentContext, submission: Submission) -> ToolResult:
        analysis = self.scorer.score(submission)
        return ToolResult(self.name, True, {"analysis": analysis, "submission": submission})


class ClassifyAnalysisTool(BaseTool):
    """Applies weakness/strength thresholds."""
    name = "classify_analysis"
    description = "Identify weaknesses and strengths from an analysis"

    def execute(self, _context: AgentContext, analysis: Analysis) -> ToolResult:
        weaknesses, strengths = classify(analysis)
        return ToolResult(self.name, True, {"weaknesses": weaknesses, "strengths": strengths})


class FeedbackGeneratorTool(BaseTool):
    """Builds feedback items from weaknesses and strengths."""
    name = "generate_feedback"
    description = "Map weaknesses and strengths to feedback messages"

    def execute(self, _context: AgentContext, weaknesses: List[Weakness],
                strengths: List[Strength]) -> ToolResult:
        return ToolResult(self.name, True, {"feedback": generate_feedback(weaknesses, strengths)})


class MicroChallengeTool(BaseTool):
    """Builds one practice challenge per weakness."""
    name = "generate_micro_challenges"
    description = "Create targeted micro-challenges for weaknesses"

    def __init__(self, templates: Optional[Dict[str, Dict[str, str]]] = None):
        self.templates = templates

    def execute(self, _context: AgentContext, weaknesses: List[Weakness]) -> ToolResult:
        challenges = generate_micro_challenges(weaknesses, self.templates)
        return ToolResult(self.name, True, {"micro_challenges": challenges})


class RecommendationTool(BaseTool):
    """Study recommendations from raw scores."""
    name = "generate_recommendations"
    description = "Recommend study actions for low-scoring dimensions"

    def execute(self, _context: AgentContext, analysis: Analysis) -> ToolResult:
        return ToolResult(self.name, True, {"recommendations": generate_recommendations(analysis)})


class ProgressTrackerTool(BaseTool):
    """Appends to the session history and reports the trend."""
    name = "track_progress"
    description = "Record an analysis and compute the session trend"

    def __init__(self, tracker: ProgressTracker):
        self.tracker = tracker

    def execute(self, _context: AgentContext, session_id: str, analysis: Analysis,
                feedback: List[FeedbackItem]) -> ToolResult:
        self.tracker.record(session_id, analysis, feedback)
        progress = self.tracker.calculate_progress(session_id)
        return ToolResult(self.name, True, {"progress": progress})


class CritiqueAgent(BaseAgent):
    """Critique Agent - argument analysis with feedback and micro-challenges."""

    def __init__(self, tracker: Optional[ProgressTracker] = None, verbose: bool = False,
                 challenge_templates: Optional[Dict[str, Dict[str, str]]] = None):
        self.tracker = tracker if tracker is not None else ProgressTracker()
        tools = [
            ScoreTextTool(TextScorer()),
            ClassifyAnalysisTool(),
            FeedbackGeneratorTool(),
            MicroChallengeTool(challenge_templates),
            RecommendationTool(),
            ProgressTrackerTool(self.tracker),
        ]
        super().__init__(AgentRole.CRITIQUE, tools, verbose)
        self.enhanced_logger = create_logger("Critique", verbose=verbose)

    def analyze(self, text: str, session_id: str = "default",
                context: Optional[AgentContext] = None) -> ArgumentReport:
        """Run the full pipeline on one text and record it under session_id."""
        context = context or AgentContext(message=text, session_id=session_id)

        submission = Submission(text=text, session_id=session_id, student_id=context.student_id)
        analysis = self._run_tool("score_text", context, submission=submission).data["analysis"]

        classified = self._run_tool("classify_analysis", context, analysis=analysis).data
        weaknesses = classified["weaknesses"]
        strengths = classified["strengths"]

        feedback = self._run_tool(
            "generate_feedback", context, weaknesses=weaknesses, strengths=strengths
        ).data["feedback"]
        challenges = self._run_tool(
            "generate_micro_challenges", context, weaknesses=weaknesses
        ).data["micro_challenges"]
        recommendations = self._run_tool(
            "generate_recommendations", context, analysis=analysis
        ).data["recommendations"]
        progress = self._run_tool(
            "track_progress", context, session_id=session_id, analysis=analysis, feedback=feedback
        ).data["progress"]

        self.enhanced_logger.analysis_result(
            session_id,
            analysis.overall.total,
            [w.type for w in weaknesses],
            [s.category.value for s in strengths],
        )

        return ArgumentReport(
            analysis=analysis,
            weaknesses=weaknesses,
            strengths=strengths,
            feedback=feedback,
            micro_challenges=challenges,
            recommendations=recommendations,
            progress=progress,
        )

    def process(self, context: AgentContext) -> AgentContext:
        text = extract_text(context.message)
        if not text.strip():
            raise EmptySubmissionError("student_text")

        self._log_verbose(f"Analyzing argument ({len(text)} chars)...")
        report = self.analyze(text, context.session_id, context)

        context.response = {
            "type": "critique_response",
            **report.to_dict(),
            "context": context.session_context,
        }
        logger.info(
            f"Critique complete for session {context.session_id}: "
            f"{len(report.weaknesses)} weaknesses, trend={report.progress.trend}"
        )
        return context
