"""
Analysis Agent - Deep Analysis and Progress Metrics

Reads a submission without recording it:
- Cognitive level (highest critical-thinking operation present)
- Critical thinking, creativity and metacognition scores
- Learning style
- Session progress (read-only)

Then derives metrics: overall score, improvement areas, strengths, next steps.
"""
from typing import Optional
import logging

from .core import BaseAgent, BaseTool, AgentContext, AgentRole, ToolResult
from .critique_agent import extract_text
from ..errors import EmptySubmissionError
from ..feedback.templates import CHALLENGE_TEMPLATES
from ..learning_style.detector import LearningStyleDetector
from ..progress.tracker import ProgressTracker
from ..scoring.classifier import classify
from ..scoring.text_scorer import Analysis, CriticalThinkingMetrics, TextScorer
from config import ScoringConfig

logger = logging.getLogger(__name__)

# Highest operation first
COGNITIVE_LEVELS = (
    ("synthesis", "synthesis"),
    ("evaluation", "evaluation"),
    ("analysis", "analysis"),
    ("questioning", "comprehension"),
)


def cognitive_level(critical: CriticalThinkingMetrics) -> str:
    for attribute, level in COGNITIVE_LEVELS:
        if getattr(critical, attribute) > 0:
            return level
    return "recall"


class DeepAnalysisTool(BaseTool):
    """Scores a text and summarizes its cognitive profile."""
    name = "deep_analysis"
    description = "Cognitive level, critical thinking, creativity, metacognition and learning style"

    def __init__(self, scorer: TextScorer, detector: LearningStyleDetector,
                 tracker: Optional[ProgressTracker]):
        self.scorer = scorer
        self.detector = detector
        self.tracker = tracker

    def execute(self, context: AgentContext, text: str) -> ToolResult:
        analysis = self.scorer.score(text)
        critical = analysis.critical_thinking
        divisor = ScoringConfig.CRITICAL_THINKING_DIVISOR

        progress = (
            self.tracker.calculate_progress(context.session_id).to_dict()
            if self.tracker is not None else None
        )

        return ToolResult(self.name, True, {
            "analysis": analysis,
            "deep_analysis": {
                "cognitive_level": cognitive_level(critical),
                "critical_thinking": critical.overall_level,
                "creativity": min(analysis.originality.creative_elements / divisor, 1.0),
                "metacognition": min(critical.metacognition / divisor, 1.0),
                "learning_style": self.detector.detect(text).modality.value,
                "progress": progress,
            },
        })


class MetricsTool(BaseTool):
    """Headline metrics for dashboards."""
    name = "calculate_metrics"
    description = "Overall score, improvement areas, strengths and next steps"

    def execute(self, _context: AgentContext, analysis: Analysis) -> ToolResult:
        weaknesses, strengths = classify(analysis)
        return ToolResult(self.name, True, {
            "overall_score": analysis.overall.total,
            "improvement_areas": [w.area for w in weaknesses],
            "strengths": [s.area for s in strengths],
            "next_steps": [
                CHALLENGE_TEMPLATES[w.type]["prompt"]
                for w in weaknesses if w.type in CHALLENGE_TEMPLATES
            ],
        })


class AnalysisAgent(BaseAgent):
    """Analysis Agent - read-only deep analysis."""

    def __init__(self, tracker: Optional[ProgressTracker] = None, verbose: bool = False):
        tools = [
            DeepAnalysisTool(TextScorer(), LearningStyleDetector(), tracker),
            MetricsTool(),
        ]
        super().__init__(AgentRole.ANALYSIS, tools, verbose)

    def process(self, context: AgentContext) -> AgentContext:
        text = extract_text(context.message)
        if not text.strip():
            raise EmptySubmissionError("text")

        deep = self._run_tool("deep_analysis", context, text=text).data
        metrics = self._run_tool("calculate_metrics", context, analysis=deep["analysis"]).data

        self._log_verbose(
            f"Deep analysis: level={deep['deep_analysis']['cognitive_level']} "
            f"score={metrics['overall_score']:.2f}"
        )

        context.response = {
            "type": "analysis_response",
            "analysis": deep["deep_analysis"],
            "metrics": metrics,
            "context": context.session_context,
        }
        return context
