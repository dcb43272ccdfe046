"""
Lexical Indicator Library - Spanish keyword tables for argument scoring.

Every table is a tuple of lowercase phrases. A phrase "hits" once per
non-overlapping, case-insensitive occurrence anywhere in the text, so
"considerar" also matches inside "considerarlo". That is the intended
behaviour: scores are lexical counts, not parses.
"""
from typing import Dict, Iterable, Tuple


# Structure
INTRODUCTION_INDICATORS = (
    "introducción",
    "en primer lugar",
    "para comenzar",
    "inicialmente",
)

CONCLUSION_INDICATORS = (
    "en conclusión",
    "finalmente",
    "para terminar",
    "en resumen",
)

COHERENCE_INDICATORS = (
    "por lo tanto",
    "en consecuencia",
    "además",
    "sin embargo",
    "por otro lado",
)

ORGANIZATION_INDICATORS = (
    "primero",
    "segundo",
    "tercero",
    "finalmente",
    "en primer lugar",
)

# Content
THESIS_INDICATORS = (
    "creo que",
    "mi opinión",
    "considero",
    "mi posición",
    "estoy convencido",
)

DEPTH_INDICATORS = (
    "analizar",
    "examinar",
    "investigar",
    "profundizar",
    "detallar",
)

BREADTH_INDICATORS = (
    "además",
    "también",
    "por otro lado",
    "asimismo",
    "igualmente",
)

# Reasoning
LOGICAL_CONNECTION_INDICATORS = (
    "por lo tanto",
    "en consecuencia",
    "esto demuestra",
    "se puede concluir",
    "debido a",
)

# Absolutist wording, counted against reasoning quality
FALLACY_INDICATORS = (
    "todos",
    "nunca",
    "siempre",
    "nadie",
    "todo el mundo",
)

# Evidence, grouped by kind
EVIDENCE_INDICATORS: Dict[str, Tuple[str, ...]] = {
    "statistics": ("porcentaje", "estadística", "dato", "cifra"),
    "examples": ("ejemplo", "caso", "instancia", "muestra"),
    "quotes": ("cita", "dice", "menciona", "afirma"),
    "references": ("según", "fuente", "referencia", "estudio"),
}

SOURCE_INDICATORS = (
    "según",
    "fuente",
    "referencia",
    "cita",
    "dice que",
    "menciona",
)

# Critical thinking
QUESTIONING_INDICATORS = (
    "¿",
    "por qué",
    "cómo",
    "qué",
    "cuándo",
    "dónde",
)

ANALYSIS_INDICATORS = (
    "analizar",
    "examinar",
    "investigar",
    "estudiar",
    "evaluar",
)

EVALUATION_INDICATORS = (
    "evaluar",
    "juzgar",
    "valorar",
    "considerar",
    "ponderar",
)

SYNTHESIS_INDICATORS = (
    "sintetizar",
    "combinar",
    "integrar",
    "unificar",
    "consolidar",
)

METACOGNITION_INDICATORS = (
    "reflexionar",
    "pensar sobre",
    "considerar",
    "meditar",
    "contemplar",
)

# Originality
PERSONAL_INSIGHT_INDICATORS = (
    "mi experiencia",
    "creo que",
    "pienso que",
    "mi opinión",
    "considero",
)

CREATIVE_INDICATORS = (
    "imaginemos",
    "supongamos",
    "crear",
    "diseñar",
    "innovar",
)

# Learning modalities, keyed by modality value
MODALITY_INDICATORS: Dict[str, Tuple[str, ...]] = {
    "visual": (
        "veo", "visualizar", "imagen", "diagrama", "gráfico", "color", "forma",
        "dibujo", "esquema", "mapa", "foto", "ilustración", "ver", "mirar",
    ),
    "auditory": (
        "escucho", "sonido", "música", "hablar", "discutir", "debate",
        "conversación", "audio", "podcast", "explicar", "contar", "narrar",
        "oír", "escuchar",
    ),
    "reading": (
        "leer", "escribir", "texto", "libro", "artículo", "ensayo", "notas",
        "resumen", "lista", "palabras", "vocabulario", "definir",
        "explicar por escrito",
    ),
    "kinesthetic": (
        "hacer", "experimentar", "práctica", "manos", "tocar", "construir",
        "crear", "movimiento", "actividad", "proyecto", "manipular", "jugar",
        "actuar",
    ),
}


def count_indicator_hits(text: str, phrases: Iterable[str]) -> int:
    """Sum non-overlapping, case-insensitive occurrences of each phrase in text."""
    if not text:
        return 0
    lowered = text.lower()
    return sum(lowered.count(phrase) for phrase in phrases if phrase)


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """True when at least one phrase occurs in text (case-insensitive)."""
    if not text:
        return False
    lowered = text.lower()
    return any(phrase in lowered for phrase in phrases)
