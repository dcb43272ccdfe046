"""
Static feedback, challenge and recommendation tables, keyed by weakness type.
"""

FEEDBACK_TEMPLATES = {
    "thesis_weak": {
        "message": "Tu respuesta necesita una tesis más clara. ¿Cuál es tu posición principal sobre el tema?",
        "suggestion": "Comienza con una declaración clara de tu posición",
        "priority": "high"
    },
    "evidence_lacking": {
        "message": "Necesitas más evidencia para respaldar tu argumento. ¿Qué datos o ejemplos puedes usar?",
        "suggestion": "Incluye al menos 2-3 ejemplos específicos o datos relevantes",
        "priority": "medium"
    },
    "source_dependency": {
        "message": "Tu respuesta depende mucho de fuentes externas. ¿Cómo puedes desarrollar tu propio análisis?",
        "suggestion": "Combina información de fuentes con tu propio razonamiento",
        "priority": "high"
    },
    "reasoning_weak": {
        "message": "Hay inconsistencias en tu razonamiento. Revisa las conexiones entre tus ideas.",
        "suggestion": "Usa conectores lógicos para unir tus argumentos de manera coherente",
        "priority": "medium"
    },
    "critical_thinking_low": {
        "message": "Necesitas desarrollar más pensamiento crítico. ¿Qué preguntas puedes hacer sobre el tema?",
        "suggestion": "Considera diferentes perspectivas y cuestiona las suposiciones",
        "priority": "high"
    }
}

STRENGTH_TEMPLATE = {
    "message": "Excelente trabajo en {area}. {detail}",
    "suggestion": "Continúa desarrollando esta fortaleza",
    "priority": "low"
}

CHALLENGE_TEMPLATES = {
    "thesis_weak": {
        "prompt": "Escribe una oración que exprese claramente tu posición principal sobre el tema",
        "skill": "thesis_formation",
        "hint": "Comienza con 'Mi posición es que...' o 'Creo que...'",
        "criteria": "Debe ser una declaración clara y específica"
    },
    "evidence_lacking": {
        "prompt": "Identifica 3 datos o ejemplos específicos que respalden tu argumento",
        "skill": "evidence_gathering",
        "hint": "Busca estadísticas, ejemplos concretos o casos específicos",
        "criteria": "Deben ser relevantes y específicos al tema"
    },
    "source_dependency": {
        "prompt": "Reescribe uno de tus párrafos explicando la idea con tus propias palabras y tu propia conclusión",
        "skill": "independent_analysis",
        "hint": "Usa 'Pienso que...' o 'Desde mi experiencia...' después de cada fuente citada",
        "criteria": "Debe aportar una interpretación propia, no solo repetir la fuente"
    },
    "reasoning_weak": {
        "prompt": "Explica cómo una de tus ideas principales se conecta con otra",
        "skill": "logical_connection",
        "hint": "Usa palabras como 'por lo tanto', 'en consecuencia', 'esto demuestra'",
        "criteria": "Debe mostrar una conexión lógica clara"
    },
    "critical_thinking_low": {
        "prompt": "Formula 2 preguntas críticas sobre el tema que no hayas considerado",
        "skill": "critical_questioning",
        "hint": "Pregunta sobre suposiciones, alternativas o implicaciones",
        "criteria": "Deben ser preguntas que requieran análisis profundo"
    }
}

CHALLENGE_ESTIMATED_TIME = "5-10 minutos"

RECOMMENDATION_TEMPLATES = {
    "structure": {
        "area": "Estructura",
        "action": "Usa un esquema antes de escribir para organizar tus ideas",
        "priority": "high"
    },
    "content": {
        "area": "Contenido",
        "action": "Define claramente tu tesis principal al inicio",
        "priority": "high"
    },
    "reasoning": {
        "area": "Razonamiento",
        "action": "Practica conectar ideas usando conectores lógicos",
        "priority": "medium"
    },
    "evidence": {
        "area": "Evidencia",
        "action": "Incluye más ejemplos específicos y datos relevantes",
        "priority": "medium"
    }
}

STUDENT_SUGGESTION_TEMPLATES = {
    "thesis": {
        "message": "Tu respuesta necesita una tesis clara. ¿Cuál es tu posición principal sobre el tema?",
        "priority": "high"
    },
    "evidence": {
        "message": "Necesitas más evidencia para respaldar tu argumento. ¿Qué datos o ejemplos puedes usar?",
        "priority": "medium"
    },
    "originality": {
        "message": "Tu respuesta depende mucho de fuentes externas. ¿Cómo puedes desarrollar tu propio análisis?",
        "priority": "high"
    }
}
