"""
Exception types raised by the Argument Coach engine.

Scoring itself never raises on odd input (empty text scores as zero).
These are raised at the contract edges: role handlers that require
text, the router, and the persistence collaborator.
"""


class ArgumentCoachError(Exception):
    """Base class for engine errors."""


class EmptySubmissionError(ArgumentCoachError):
    """A caller's contract required non-empty text and got none."""

    def __init__(self, field_name: str = "text"):
        self.field_name = field_name
        super().__init__(f"{field_name} is required")


class UnknownAgentError(ArgumentCoachError):
    """Routing target is not a registered agent role."""

    def __init__(self, agent_id: str):
        self.agent_id = agent_id
        super().__init__(f"Agent {agent_id} not found")


class PersistenceError(ArgumentCoachError):
    """The interaction/learning-style store failed."""
