"""
Persistence collaborator interface and in-memory implementation.
"""
from .interactions import (
    InteractionRecord,
    LearningStyleProfile,
    InteractionRepository,
    InMemoryInteractionRepository
)

__all__ = [
    'InteractionRecord',
    'LearningStyleProfile',
    'InteractionRepository',
    'InMemoryInteractionRepository'
]
