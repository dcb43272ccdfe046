"""
Teacher Agent - Inclusive Activities Adapted to Learning Styles

Given an activity request from a teacher:
- Looks up the student's stored learning style (if any)
- Builds the activity (title, objectives, resources, assessment criteria)
- Selects modality-specific adaptations, falling back to a balanced set
"""
from typing import Dict, Any, List, Optional
import logging

from .core import BaseAgent, BaseTool, AgentContext, AgentRole, ToolResult
from ..feedback.templates import CHALLENGE_TEMPLATES
from ..learning_style.adaptation import select_adaptations
from ..learning_style.detector import Modality
from ..persistence.interactions import InteractionRepository
from ..scoring.classifier import AREA_LABELS, WEAKNESS_TYPES
from config import LearningStyleConfig

logger = logging.getLogger(__name__)


def parse_activity_request(payload: Any) -> Dict[str, Any]:
    """Normalize a teacher payload (string topic, flat dict, or {'requirements': {...}})."""
    if isinstance(payload, str):
        return {"title": payload, "objectives": []}
    if not isinstance(payload, dict):
        return {"objectives": []}

    request = dict(payload.get("requirements") or payload)
    objectives = request.get("objectives") or []
    if isinstance(objectives, str):
        objectives = [line.strip(" -•\t") for line in objectives.splitlines() if line.strip()]
    request["objectives"] = list(objectives)
    return request


class LearningStyleLookupTool(BaseTool):
    """Reads a student's recorded learning style."""
    name = "lookup_learning_style"
    description = "Fetch the stored learning-style profile for a student"

    def __init__(self, repository: Optional[InteractionRepository]):
        self.repository = repository

    def execute(self, _context: AgentContext, student_id: Optional[str]) -> ToolResult:
        if self.repository is None or not student_id:
            return ToolResult(self.name, True, {"profile": None})
        profile = self.repository.get_learning_style(student_id)
        return ToolResult(self.name, True, {"profile": profile})


class InclusiveActivityTool(BaseTool):
    """Builds the activity description."""
    name = "build_inclusive_activity"
    description = "Assemble title, objectives, resources and assessment for an activity"

    def execute(self, _context: AgentContext, request: Dict[str, Any],
                adaptations: Dict[Modality, Any]) -> ToolResult:
        title = (
            request.get("title")
            or request.get("topic")
            or LearningStyleConfig.DEFAULT_INCLUSIVE_TITLE
        )

        resources: List[str] = []
        for bundle in adaptations.values():
            for resource in bundle.resources:
                if resource not in resources:
                    resources.append(resource)

        assessment = {
            "type": "formativa",
            "criteria": [
                {
                    "area": AREA_LABELS[category],
                    "criterion": CHALLENGE_TEMPLATES[weakness_type]["criteria"],
                }
                for category, weakness_type in WEAKNESS_TYPES.items()
                if weakness_type in CHALLENGE_TEMPLATES
            ],
        }

        return ToolResult(self.name, True, {"activity": {
            "title": title,
            "topic": request.get("topic") or title,
            "objectives": request.get("objectives", []),
            "complexity": request.get("complexity", "medium"),
            "inclusion_needs": list(request.get("inclusion_needs") or []),
            "resources": resources,
            "assessment": assessment,
        }})


class AdaptationTool(BaseTool):
    """Selects adaptation bundles for a modality."""
    name = "select_adaptations"
    description = "Pick activity and resource bundles for a learning style"

    def execute(self, _context: AgentContext, modality: Optional[str], topic: Optional[str],
                confidence: Optional[float]) -> ToolResult:
        adaptations = select_adaptations(modality, topic, confidence)
        return ToolResult(self.name, True, {"adaptations": adaptations})


class TeacherAgent(BaseAgent):
    """Teacher Agent - inclusive activity generation."""

    def __init__(self, repository: Optional[InteractionRepository] = None, verbose: bool = False):
        tools = [
            LearningStyleLookupTool(repository),
            InclusiveActivityTool(),
            AdaptationTool(),
        ]
        super().__init__(AgentRole.TEACHER, tools, verbose)

    def process(self, context: AgentContext) -> AgentContext:
        request = parse_activity_request(context.message)
        student_id = request.get("student_id") or context.student_id

        profile = self._run_tool("lookup_learning_style", context, student_id=student_id).data["profile"]

        modality = request.get("learning_style") or (profile.modality if profile else None)
        confidence = request.get("confidence")
        if confidence is None and profile is not None:
            confidence = profile.confidence

        topic = request.get("title") or request.get("topic")
        adaptations = self._run_tool(
            "select_adaptations", context, modality=modality, topic=topic, confidence=confidence
        ).data["adaptations"]

        activity = self._run_tool(
            "build_inclusive_activity", context, request=request, adaptations=adaptations
        ).data["activity"]

        self._log_verbose(
            f"Activity '{activity['title']}' with {len(adaptations)} adaptation bundles "
            f"(style: {modality or 'none'})"
        )

        context.response = {
            "type": "teacher_response",
            "activity": activity,
            "adaptations": {m.value: bundle.to_dict() for m, bundle in adaptations.items()},
            "student_learning_style": profile.to_dict() if profile else None,
            "context": context.session_context,
        }
        return context
