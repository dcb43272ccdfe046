"""
Adaptation Selector - Picks activity/resource bundles for a learning modality.

- Confident modality: one primary bundle
- Low confidence: primary bundle plus two complementary bundles at lower weight
  (the primary weight is floored at MIN_PRIMARY_WEIGHT, above COMPLEMENTARY_WEIGHT)
- No modality: all four bundles, equally weighted
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Union
import logging

from .detector import Modality, MODALITY_PRIORITY
from config import LearningStyleConfig

logger = logging.getLogger(__name__)


ADAPTATIONS_BY_MODALITY = {
    Modality.VISUAL: {
        "activities": [
            "Crear un mapa conceptual sobre {topic}",
            "Diseñar infografías que representen los argumentos principales de {topic}",
            "Usar diagramas de flujo para organizar las ideas sobre {topic}",
            "Crear una presentación visual con imágenes y gráficos sobre {topic}",
        ],
        "resources": [
            "Herramientas de diseño gráfico",
            "Plantillas de mapas conceptuales",
            "Biblioteca de imágenes educativas",
            "Software de presentaciones",
        ],
    },
    Modality.AUDITORY: {
        "activities": [
            "Participar en un debate oral sobre {topic}",
            "Grabar un podcast explicando los argumentos sobre {topic}",
            "Realizar una exposición oral con argumentos sobre {topic}",
            "Participar en discusiones grupales estructuradas sobre {topic}",
        ],
        "resources": [
            "Grabadora de audio",
            "Plantillas de debate",
            "Biblioteca de podcasts educativos",
            "Guías de expresión oral",
        ],
    },
    Modality.READING: {
        "activities": [
            "Redactar un ensayo estructurado sobre {topic}",
            "Crear un resumen escrito de los argumentos sobre {topic}",
            "Elaborar fichas de lectura con citas sobre {topic}",
            "Escribir un análisis crítico por escrito sobre {topic}",
        ],
        "resources": [
            "Plantillas de ensayo",
            "Guías de escritura académica",
            "Biblioteca de textos de referencia",
            "Herramientas de citación",
        ],
    },
    Modality.KINESTHETIC: {
        "activities": [
            "Crear un proyecto práctico sobre {topic}",
            "Realizar experimentos que demuestren los argumentos sobre {topic}",
            "Construir modelos físicos de los conceptos de {topic}",
            "Participar en actividades de role-play sobre {topic}",
        ],
        "resources": [
            "Materiales de construcción",
            "Kits de experimentos",
            "Herramientas de modelado",
            "Espacios de trabajo colaborativo",
        ],
    },
}

COMPLEMENTARY_MODALITIES = {
    Modality.VISUAL: (Modality.READING, Modality.KINESTHETIC),
    Modality.AUDITORY: (Modality.VISUAL, Modality.KINESTHETIC),
    Modality.READING: (Modality.VISUAL, Modality.AUDITORY),
    Modality.KINESTHETIC: (Modality.VISUAL, Modality.AUDITORY),
}


@dataclass(frozen=True)
class AdaptationBundle:
    modality: Modality
    activities: List[str] = field(default_factory=list)
    resources: List[str] = field(default_factory=list)
    weight: float = LearningStyleConfig.BALANCED_WEIGHT
    primary: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modality": self.modality.value,
            "activities": list(self.activities),
            "resources": list(self.resources),
            "weight": self.weight,
            "primary": self.primary,
        }


def build_bundle(modality: Modality, topic: Optional[str], weight: float,
                 primary: bool = False) -> AdaptationBundle:
    table = ADAPTATIONS_BY_MODALITY[modality]
    topic = topic or LearningStyleConfig.DEFAULT_ACTIVITY_TITLE
    return AdaptationBundle(
        modality=modality,
        activities=[a.format(topic=topic) for a in table["activities"]],
        resources=list(table["resources"]),
        weight=weight,
        primary=primary,
    )


def complementary_modalities(modality: Modality) -> List[Modality]:
    return list(COMPLEMENTARY_MODALITIES.get(modality, (Modality.VISUAL, Modality.AUDITORY)))


def default_adaptations(topic: Optional[str] = None) -> Dict[Modality, AdaptationBundle]:
    """Balanced bundle for every modality."""
    return {
        modality: build_bundle(modality, topic, LearningStyleConfig.BALANCED_WEIGHT)
        for modality in MODALITY_PRIORITY
    }


def select_adaptations(modality: Union[Modality, str, None],
                       activity_title: Optional[str] = None,
                       confidence: Optional[float] = None) -> Dict[Modality, AdaptationBundle]:
    """
    Activity/resource bundles for a learner's modality.

    Args:
        modality: Detected or stored modality; None/undetermined means no preference
        activity_title: Topic interpolated into each activity
        confidence: Caller's confidence in the modality (defaults to 0.5)

    Returns:
        Mapping of modality to bundle, primary first
    """
    modality = Modality.parse(modality)
    if modality is Modality.UNDETERMINED:
        logger.debug("No learning style on record, using balanced adaptations")
        return default_adaptations(activity_title)

    if confidence is None:
        confidence = LearningStyleConfig.DEFAULT_CONFIDENCE

    primary_weight = max(confidence, LearningStyleConfig.MIN_PRIMARY_WEIGHT)
    adaptations = {
        modality: build_bundle(modality, activity_title, primary_weight, primary=True)
    }

    if confidence < LearningStyleConfig.LOW_CONFIDENCE_THRESHOLD:
        for other in complementary_modalities(modality):
            adaptations[other] = build_bundle(
                other, activity_title, LearningStyleConfig.COMPLEMENTARY_WEIGHT
            )

    return adaptations
