"""
Tests for feedback, micro-challenges, recommendations and learning styles.

Run with: pytest tests/test_feedback.py -v
"""
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


CLIMATE_TEXT = (
    "Creo que el cambio climático es grave. "
    "Según un estudio, las temperaturas subieron 2 grados."
)


@pytest.fixture
def climate_analysis():
    from argument_coach.scoring import score_text
    return score_text(CLIMATE_TEXT)


class TestFeedbackGenerator:
    """Tests for feedback items and recommendations."""

    def test_one_item_per_weakness(self, climate_analysis):
        from argument_coach.scoring import classify
        from argument_coach.feedback import generate_feedback, FEEDBACK_TEMPLATES

        weaknesses, strengths = classify(climate_analysis)
        feedback = generate_feedback(weaknesses, strengths)

        assert [f.type for f in feedback] == [w.type for w in weaknesses]
        assert feedback[0].message == FEEDBACK_TEMPLATES["reasoning_weak"]["message"]

    def test_strength_praise(self):
        from argument_coach.scoring import classify, score_text
        from argument_coach.feedback import generate_feedback

        weaknesses, strengths = classify(score_text("Por ejemplo, el caso muestra un dato."))
        feedback = generate_feedback(weaknesses, strengths)
        praise = [f for f in feedback if f.type == "strength"]

        assert len(praise) == 1
        assert praise[0].message.startswith("Excelente trabajo en Evidencia.")
        # Weakness items come before praise
        assert feedback[-1].type == "strength"

    def test_recommendations(self, climate_analysis):
        from argument_coach.feedback import generate_recommendations

        areas = [r.area for r in generate_recommendations(climate_analysis)]
        assert areas == ["Estructura", "Razonamiento"]

    def test_no_recommendations_for_empty_text(self):
        from argument_coach.scoring import score_text
        from argument_coach.feedback import generate_recommendations

        assert generate_recommendations(score_text("")) == []

    def test_student_suggestions(self):
        from argument_coach.feedback import generate_student_suggestions

        suggestions = generate_student_suggestions(
            {"has_thesis": False, "evidence_count": 0, "source_dependency": 0.8}
        )
        assert [s["type"] for s in suggestions] == ["thesis", "evidence", "originality"]
        assert generate_student_suggestions(
            {"has_thesis": True, "evidence_count": 3, "source_dependency": 0.2}
        ) == []


class TestMicroChallenges:
    """Tests for micro-challenge generation."""

    def test_one_challenge_per_weakness(self, climate_analysis):
        from argument_coach.scoring import identify_weaknesses
        from argument_coach.feedback import generate_micro_challenges

        weaknesses = identify_weaknesses(climate_analysis)
        challenges = generate_micro_challenges(weaknesses)

        assert [c.type for c in challenges] == [w.type for w in weaknesses]
        assert all(c.estimated_time == "5-10 minutos" for c in challenges)
        assert challenges[0].priority == weaknesses[0].priority

    def test_every_weakness_type_has_a_template(self):
        from argument_coach.scoring import WEAKNESS_TYPES
        from argument_coach.feedback import CHALLENGE_TEMPLATES, FEEDBACK_TEMPLATES

        for weakness_type in WEAKNESS_TYPES.values():
            assert weakness_type in CHALLENGE_TEMPLATES
            assert weakness_type in FEEDBACK_TEMPLATES

    def test_missing_template_is_skipped(self):
        from argument_coach.scoring import Weakness, WeaknessCategory
        from argument_coach.feedback import generate_micro_challenges, CHALLENGE_TEMPLATES

        weaknesses = [
            Weakness(WeaknessCategory.THESIS, "Tesis", 0.3, "high"),
            Weakness(WeaknessCategory.EVIDENCE, "Evidencia", 0.2, "medium"),
        ]
        templates = {"thesis_weak": CHALLENGE_TEMPLATES["thesis_weak"]}

        challenges = generate_micro_challenges(weaknesses, templates)
        assert [c.type for c in challenges] == ["thesis_weak"]

    def test_challenge_ids_are_unique(self):
        from argument_coach.feedback import generate_challenge_id

        ids = {generate_challenge_id() for _ in range(200)}
        assert len(ids) == 200
        assert all(i.startswith("challenge_") for i in ids)


class TestLearningStyleDetector:
    """Tests for modality detection."""

    def test_tie_resolves_to_visual(self):
        from argument_coach.learning_style import LearningStyleDetector, Modality

        detector = LearningStyleDetector()
        for text in (
            "Prefiero un diagrama, un esquema y un mapa, o un podcast, un debate y música.",
            "Prefiero un podcast, un debate y música, o un diagrama, un esquema y un mapa.",
        ):
            detection = detector.detect(text)
            assert detection.scores["visual"] == 3
            assert detection.scores["auditory"] == 3
            assert detection.modality is Modality.VISUAL
            assert detection.confidence == pytest.approx(0.5)

    def test_single_hit_is_undetermined(self):
        from argument_coach.learning_style import detect_modality, Modality

        assert detect_modality("Me gusta el diagrama.") is Modality.UNDETERMINED
        assert detect_modality("") is Modality.UNDETERMINED

    def test_kinesthetic(self):
        from argument_coach.learning_style import LearningStyleDetector, Modality

        detection = LearningStyleDetector().detect(
            "Quiero construir un proyecto y experimentar con las manos."
        )
        assert detection.modality is Modality.KINESTHETIC
        assert detection.confidence == 1.0
        assert detection.detected is True

    def test_parse_stored_values(self):
        from argument_coach.learning_style import Modality

        assert Modality.parse("VISUAL") is Modality.VISUAL
        assert Modality.parse(" reading ") is Modality.READING
        assert Modality.parse("telepathic") is Modality.UNDETERMINED
        assert Modality.parse(None) is Modality.UNDETERMINED


class TestAdaptations:
    """Tests for the adaptation selector."""

    def test_no_modality_returns_balanced_set(self):
        from argument_coach.learning_style import select_adaptations

        adaptations = select_adaptations(None)

        assert len(adaptations) == 4
        assert all(b.weight == 0.5 and not b.primary for b in adaptations.values())
        assert "Actividad de pensamiento crítico" in adaptations[list(adaptations)[0]].activities[0]

    def test_confident_modality_is_primary_only(self):
        from argument_coach.learning_style import select_adaptations, Modality

        adaptations = select_adaptations("visual", "La energía solar", confidence=0.9)

        assert list(adaptations) == [Modality.VISUAL]
        bundle = adaptations[Modality.VISUAL]
        assert bundle.primary is True
        assert bundle.weight == 0.9
        assert all("La energía solar" in a for a in bundle.activities)

    def test_low_confidence_adds_complementary(self):
        from argument_coach.learning_style import select_adaptations, Modality

        adaptations = select_adaptations(Modality.VISUAL)

        assert list(adaptations) == [Modality.VISUAL, Modality.READING, Modality.KINESTHETIC]
        assert adaptations[Modality.VISUAL].weight == 0.5
        assert adaptations[Modality.READING].weight == 0.3
        assert adaptations[Modality.READING].primary is False

    @pytest.mark.parametrize("confidence", [0.0, 0.25, 0.3, 0.5, 0.69])
    def test_primary_outweighs_complementary(self, confidence):
        from argument_coach.learning_style import select_adaptations, Modality

        adaptations = select_adaptations(Modality.VISUAL, "Agua", confidence=confidence)
        primary = adaptations[Modality.VISUAL]
        others = [b for m, b in adaptations.items() if m is not Modality.VISUAL]

        assert primary.primary is True
        assert len(others) == 2
        assert all(b.weight < primary.weight for b in others)

    def test_low_stored_confidence_through_teacher(self):
        from argument_coach.agents import create_agent_system
        from argument_coach.persistence import InMemoryInteractionRepository

        repo = InMemoryInteractionRepository()
        router = create_agent_system(repository=repo)
        # Four-way 2/2/2/2 tie: visual wins with a quarter of the hits
        router.route("ui", "student", {
            "message": "diagrama mapa podcast debate libro notas manos proyecto",
            "student_id": "alumno-1",
        })
        assert repo.get_learning_style("alumno-1").confidence == pytest.approx(0.25)

        adaptations = router.route(
            "ui", "teacher", {"student_id": "alumno-1", "title": "Agua"}
        )["response"]["adaptations"]

        primary = adaptations["visual"]["weight"]
        assert adaptations["visual"]["primary"] is True
        assert all(b["weight"] < primary for m, b in adaptations.items() if m != "visual")

    def test_undetermined_is_balanced(self):
        from argument_coach.learning_style import select_adaptations

        assert len(select_adaptations("undetermined", "Tema")) == 4
