"""
Student Agent - Quick Argument Check and Learning-Style Detection

For a student's chat message:
- Quick analysis (thesis, evidence, reasoning, source dependency, critical thinking)
- Learning-style detection from the wording
- Short suggestions
- Stores a detected style and the interaction when the student is known
"""
from typing import Optional
import logging

from .core import BaseAgent, BaseTool, AgentContext, AgentRole, ToolResult
from .critique_agent import extract_text
from ..errors import EmptySubmissionError, PersistenceError
from ..feedback.generator import generate_student_suggestions
from ..learning_style.detector import LearningStyleDetector, ModalityDetection
from ..persistence.interactions import InteractionRepository
from ..scoring.text_scorer import TextScorer
from ..utils.logger import create_logger

logger = logging.getLogger(__name__)

STUDENT_ROLE = "Estudiante"


class QuickAnalysisTool(BaseTool):
    """Five headline indicators of argument quality."""
    name = "quick_analysis"
    description = "Summarize thesis, evidence, reasoning, source dependency and critical thinking"

    def __init__(self, scorer: TextScorer):
        self.scorer = scorer

    def execute(self, _context: AgentContext, text: str) -> ToolResult:
        analysis = self.scorer.score(text)
        return ToolResult(self.name, True, {
            "has_thesis": analysis.content.has_thesis,
            "evidence_count": analysis.evidence.evidence_count,
            "reasoning_quality": analysis.reasoning.reasoning_quality,
            "source_dependency": analysis.evidence.source_dependency,
            "critical_thinking_level": analysis.critical_thinking.overall_level,
        })


class DetectLearningStyleTool(BaseTool):
    """Infers the dominant learning modality of a message."""
    name = "detect_learning_style"
    description = "Detect visual, auditory, reading or kinesthetic preference"

    def __init__(self, detector: LearningStyleDetector):
        self.detector = detector

    def execute(self, context: AgentContext, text: str) -> ToolResult:
        detection = self.detector.detect(text, context.session_context)
        return ToolResult(self.name, True, {"detection": detection})


class RecordInteractionTool(BaseTool):
    """Persists the interaction and, when detected, the learning style."""
    name = "record_interaction"
    description = "Store the student's message and detected learning style"

    def __init__(self, repository: Optional[InteractionRepository]):
        self.repository = repository

    def execute(self, _context: AgentContext, student_id: Optional[str], text: str,
                detection: ModalityDetection) -> ToolResult:
        if self.repository is None or not student_id:
            return ToolResult(self.name, True, {"stored": False})

        modality = detection.modality.value if detection.detected else None
        try:
            self.repository.record_interaction(student_id, STUDENT_ROLE, text, modality)
            if detection.detected:
                self.repository.save_learning_style(
                    student_id, modality, confidence=detection.confidence
                )
        except PersistenceError as e:
            logger.warning(f"Could not store interaction for {student_id}: {e}")
            return ToolResult(self.name, False, {"stored": False}, str(e))

        return ToolResult(self.name, True, {"stored": True, "learning_style_stored": detection.detected})


class StudentAgent(BaseAgent):
    """Student Agent - quick feedback and learning-style capture."""

    def __init__(self, repository: Optional[InteractionRepository] = None, verbose: bool = False):
        tools = [
            QuickAnalysisTool(TextScorer()),
            DetectLearningStyleTool(LearningStyleDetector()),
            RecordInteractionTool(repository),
        ]
        super().__init__(AgentRole.STUDENT, tools, verbose)
        self.enhanced_logger = create_logger("Student", verbose=verbose)

    def process(self, context: AgentContext) -> AgentContext:
        text = extract_text(context.message)
        if not text.strip():
            raise EmptySubmissionError("message")

        self._log_verbose(f"Student message ({len(text)} chars)")

        quick = self._run_tool("quick_analysis", context, text=text).data
        detection = self._run_tool("detect_learning_style", context, text=text).data["detection"]
        self.enhanced_logger.modality_result(context.student_id, detection.modality.value, detection.scores)

        stored = self._run_tool(
            "record_interaction", context,
            student_id=context.student_id, text=text, detection=detection
        ).data

        context.response = {
            "type": "student_response",
            "analysis": quick,
            "learning_style": detection.modality.value,
            "learning_style_scores": dict(detection.scores),
            "suggestions": generate_student_suggestions(quick),
            "stored": stored.get("stored", False),
            "context": context.session_context,
        }
        return context
