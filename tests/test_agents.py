"""
Tests for the agent router, the four role agents and the top-level API.

Run with: pytest tests/test_agents.py -v
"""
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


CLIMATE_TEXT = (
    "Creo que el cambio climático es grave. "
    "Según un estudio, las temperaturas subieron 2 grados."
)
VISUAL_MESSAGE = "Me encanta ver un diagrama y un mapa con color."


@pytest.fixture
def repo():
    from argument_coach.persistence import InMemoryInteractionRepository
    return InMemoryInteractionRepository()


@pytest.fixture
def router(repo):
    from argument_coach.agents import create_agent_system
    return create_agent_system(repository=repo)


class TestAgentRoles:
    """Tests for agent-id resolution."""

    def test_aliases(self):
        from argument_coach.agents import AgentRole

        assert AgentRole.resolve("a2a-agent") is AgentRole.CRITIQUE
        assert AgentRole.resolve("critique-agent") is AgentRole.CRITIQUE
        assert AgentRole.resolve("Student-Agent") is AgentRole.STUDENT
        assert AgentRole.resolve("teacher") is AgentRole.TEACHER
        assert AgentRole.resolve("analysis-agent") is AgentRole.ANALYSIS

    def test_unknown_agent(self):
        from argument_coach.agents import AgentRole
        from argument_coach.errors import UnknownAgentError

        with pytest.raises(UnknownAgentError, match="Agent grader not found"):
            AgentRole.resolve("grader")


class TestAgentRouter:
    """Tests for routing, message status and session context."""

    def test_unknown_target_fails(self, router):
        from argument_coach.agents import MessageStatus

        result = router.route("ui", "grader", {"text": CLIMATE_TEXT}, session_id="s1")

        assert result["success"] is False
        assert result["error"] == "Agent grader not found"
        assert router.messages("s1")[0].status is MessageStatus.FAILED

    def test_handler_exception_becomes_failure(self, router):
        from argument_coach.agents import AgentRole, BaseAgent, MessageStatus

        class ExplodingAgent(BaseAgent):
            def __init__(self):
                super().__init__(AgentRole.ANALYSIS, [], False)

            def process(self, context):
                raise RuntimeError("boom")

        router.register(ExplodingAgent())
        result = router.route("ui", "analysis", "texto", session_id="s1")

        assert result == {"success": False, "message_id": result["message_id"], "error": "boom"}
        message = router.messages("s1")[0]
        assert message.status is MessageStatus.FAILED
        assert message.error == "boom"

    def test_successful_route(self, router):
        from argument_coach.agents import MessageStatus

        result = router.route("ui", "a2a-agent", {"student_text": CLIMATE_TEXT}, session_id="s1")

        assert result["success"] is True
        assert result["message_id"].startswith("msg_")
        assert result["response"]["type"] == "critique_response"

        message = router.messages("s1")[0]
        assert message.status is MessageStatus.COMPLETED
        assert message.response == result["response"]
        assert message.to_dict()["to"] == "a2a-agent"

    def test_messages_are_logged_per_session(self, router):
        router.route("ui", "critique", CLIMATE_TEXT, session_id="s1")
        router.route("ui", "critique", CLIMATE_TEXT, session_id="s2")
        router.route("ui", "grader", CLIMATE_TEXT, session_id="s1")

        assert len(router.messages("s1")) == 2
        assert len(router.messages("s2")) == 1

    def test_context_versions(self, router):
        first = router.set_context("s1", {"student_id": "alumno-0009"})
        second = router.set_context("s1", {"student_id": "alumno-0009", "topic": "energía"})

        assert first["version"] == 1
        assert second["version"] == 2
        assert router.get_context("s1")["topic"] == "energía"
        assert router.get_context("unknown") == {}

        result = router.route("ui", "student", {"message": CLIMATE_TEXT}, session_id="s1")
        assert result["response"]["context"]["version"] == 2


class TestStudentAgent:
    """Tests for the student role."""

    def test_quick_analysis(self, router):
        result = router.route("ui", "student-agent", {"message": CLIMATE_TEXT})
        response = result["response"]

        assert response["type"] == "student_response"
        assert response["analysis"]["has_thesis"] is True
        assert response["analysis"]["evidence_count"] == 2
        assert response["suggestions"] == []
        assert response["stored"] is False

    def test_learning_style_is_stored(self, router, repo):
        result = router.route(
            "ui", "student", {"message": VISUAL_MESSAGE, "student_id": "alumno-0001"}
        )
        response = result["response"]

        assert response["learning_style"] == "visual"
        assert response["stored"] is True
        assert repo.get_learning_style("alumno-0001").modality == "visual"

        interactions = repo.read_recent_interactions("alumno-0001")
        assert len(interactions) == 1
        assert interactions[0].role == "Estudiante"
        assert interactions[0].modality == "visual"

    def test_student_id_from_session_context(self, router, repo):
        router.set_context("s1", {"student_id": "alumno-0002"})
        router.route("ui", "student", {"message": VISUAL_MESSAGE}, session_id="s1")

        assert repo.get_learning_style("alumno-0002") is not None

    def test_persistence_failure_is_a_warning(self):
        from argument_coach.agents import create_agent_system
        from argument_coach.errors import PersistenceError
        from argument_coach.persistence import InMemoryInteractionRepository

        class BrokenRepository(InMemoryInteractionRepository):
            def record_interaction(self, *args, **kwargs):
                raise PersistenceError("database unavailable")

        router = create_agent_system(repository=BrokenRepository())
        result = router.route(
            "ui", "student", {"message": VISUAL_MESSAGE, "student_id": "alumno-0001"}
        )

        assert result["success"] is True
        assert result["response"]["stored"] is False
        assert result["response"]["warnings"] == ["record_interaction: database unavailable"]

    def test_empty_message_fails(self, router):
        result = router.route("ui", "student", {"message": "  "})

        assert result["success"] is False
        assert result["error"] == "message is required"


class TestTeacherAgent:
    """Tests for the teacher role."""

    def test_activity_for_known_style(self, router, repo):
        repo.save_learning_style("alumno-0001", "visual", confidence=0.9)

        result = router.route("ui", "teacher-agent", {
            "student_id": "alumno-0001",
            "requirements": {
                "title": "Energías renovables",
                "objectives": "- Comparar fuentes de energía\n- Argumentar una postura",
            },
        })
        response = result["response"]
        activity = response["activity"]

        assert response["type"] == "teacher_response"
        assert activity["title"] == "Energías renovables"
        assert activity["objectives"] == ["Comparar fuentes de energía", "Argumentar una postura"]
        assert len(activity["assessment"]["criteria"]) == 5
        assert list(response["adaptations"]) == ["visual"]
        assert response["adaptations"]["visual"]["primary"] is True
        assert "Energías renovables" in response["adaptations"]["visual"]["activities"][0]
        assert response["student_learning_style"]["modality"] == "visual"

    def test_balanced_activity_without_profile(self, router):
        response = router.route("ui", "teacher", {})["response"]

        assert response["activity"]["title"] == "Actividad Inclusiva"
        assert len(response["adaptations"]) == 4
        assert response["student_learning_style"] is None
        assert len(response["activity"]["resources"]) == 16

    def test_string_payload_is_the_title(self, router):
        response = router.route("ui", "teacher", "Debate sobre reciclaje")["response"]
        assert response["activity"]["title"] == "Debate sobre reciclaje"

    def test_parse_activity_request(self):
        from argument_coach.agents import parse_activity_request

        request = parse_activity_request({"topic": "Agua", "objectives": ["Leer", "Debatir"]})
        assert request["topic"] == "Agua"
        assert request["objectives"] == ["Leer", "Debatir"]
        assert parse_activity_request(None) == {"objectives": []}


class TestCritiqueAgent:
    """Tests for the critique role."""

    def test_full_report(self, router):
        response = router.route("ui", "critique", {"text": CLIMATE_TEXT})["response"]

        assert [w["type"] for w in response["weaknesses"]] == ["reasoning_weak", "critical_thinking_low"]
        assert len(response["micro_challenges"]) == 2
        assert len(response["feedback"]) == 2
        assert response["progress"] == {"trend": "insufficient_data", "improvement": 0.0}

    def test_records_history(self):
        from argument_coach.agents import CritiqueAgent

        agent = CritiqueAgent()
        agent.analyze(CLIMATE_TEXT, session_id="s1")
        agent.analyze(CLIMATE_TEXT, session_id="s1")

        assert len(agent.tracker.history("s1")) == 2

    def test_empty_text_fails(self, router):
        result = router.route("ui", "critique", {"text": ""})
        assert result["error"] == "student_text is required"


class TestAnalysisAgent:
    """Tests for the analysis role."""

    def test_deep_analysis_is_read_only(self):
        from argument_coach.agents import create_agent_system
        from argument_coach.progress import ProgressTracker

        tracker = ProgressTracker()
        router = create_agent_system(tracker=tracker)
        router.route("ui", "critique", CLIMATE_TEXT, session_id="s1")
        router.route("ui", "critique", CLIMATE_TEXT, session_id="s1")

        result = router.route(
            "ui", "analysis-agent",
            {"text": "Debemos analizar y evaluar, luego sintetizar las ideas."},
            session_id="s1",
        )
        response = result["response"]

        assert response["type"] == "analysis_response"
        assert response["analysis"]["cognitive_level"] == "synthesis"
        assert response["analysis"]["progress"]["trend"] == "insufficient_data"
        assert len(tracker.history("s1")) == 2
        assert 0.0 <= response["metrics"]["overall_score"] <= 1.0
        assert response["metrics"]["improvement_areas"][0] == "Tesis"

    def test_cognitive_level(self):
        from argument_coach.agents import cognitive_level
        from argument_coach.scoring import CriticalThinkingMetrics

        assert cognitive_level(CriticalThinkingMetrics(0, 0, 0, 0, 0, 0.0)) == "recall"
        assert cognitive_level(CriticalThinkingMetrics(1, 0, 0, 0, 0, 0.2)) == "comprehension"
        assert cognitive_level(CriticalThinkingMetrics(1, 1, 1, 0, 0, 0.6)) == "evaluation"


class TestPackageApi:
    """Tests for the top-level helpers."""

    def test_analyze(self):
        from argument_coach import analyze

        result = analyze(CLIMATE_TEXT)

        assert set(result) >= {"analysis", "feedback", "micro_challenges",
                               "recommendations", "progress"}
        assert result["analysis"]["content"]["has_thesis"] is True

    def test_analyze_empty_text(self):
        from argument_coach import analyze

        result = analyze("")

        assert result["analysis"]["overall"]["total"] == 0.0
        assert result["weaknesses"] == []
        assert result["micro_challenges"] == []

    def test_analyze_uses_caller_tracker(self):
        from argument_coach import analyze, ProgressTracker

        tracker = ProgressTracker()
        analyze(CLIMATE_TEXT, {"session_id": "clase-1"}, tracker)
        analyze(CLIMATE_TEXT, {"session_id": "clase-1"}, tracker)

        assert len(tracker.history("clase-1")) == 2

    def test_detect_modality(self):
        from argument_coach import detect_modality, Modality

        assert detect_modality(VISUAL_MESSAGE) is Modality.VISUAL


class TestCoachLogger:
    """Tests for the logging wrapper."""

    def test_timer_and_metrics(self):
        from argument_coach.utils import create_logger, LogLevel

        coach_logger = create_logger("Test", level=LogLevel.MINIMAL, verbose=True)
        assert coach_logger.level is LogLevel.VERBOSE

        with coach_logger.timer("scoring"):
            pass
        coach_logger.metric("submissions", 3)

        summary = coach_logger.get_summary()
        assert "Coach Metrics: Test" in summary
        assert "submissions: 3" in summary
        assert "scoring" in coach_logger.timers

    def test_parse_level(self):
        from argument_coach.utils import LogLevel

        assert LogLevel.parse("VERBOSE") is LogLevel.VERBOSE
        assert LogLevel.parse("loud") is LogLevel.STANDARD

    def test_router_logs_phases_and_counts(self, caplog):
        import logging
        from argument_coach.agents import create_agent_system
        from argument_coach.utils import LogLevel

        router = create_agent_system()
        router.enhanced_logger.level = LogLevel.STANDARD

        with caplog.at_level(logging.INFO, logger="argument_coach"):
            router.route("ui", "critique", CLIMATE_TEXT, session_id="s1")
            router.route("ui", "critique", CLIMATE_TEXT, session_id="s1")

        messages = [r.getMessage() for r in caplog.records]
        assert any("🔄" in m and "ui -> critique" in m for m in messages)
        assert any("✅" in m and "completed" in m for m in messages)
        assert router.enhanced_logger.metrics["critique_messages"] == 2

    def test_minimal_level_hides_milestones(self, caplog):
        import logging
        from argument_coach.utils import create_logger, LogLevel

        coach_logger = create_logger("Quiet", level=LogLevel.MINIMAL)
        with caplog.at_level(logging.INFO, logger="argument_coach"):
            coach_logger.phase("routing")
            coach_logger.info("registered")
            coach_logger.warning("store unavailable")

        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["[Quiet] ⚠️ store unavailable"]

    def test_setup_logging_sets_package_level(self):
        import logging
        from argument_coach.utils import setup_logging

        package_logger = setup_logging(logging.DEBUG)
        try:
            assert package_logger.name == "argument_coach"
            assert logging.getLogger("argument_coach.agents.core").getEffectiveLevel() == logging.DEBUG
        finally:
            package_logger.setLevel(logging.NOTSET)
