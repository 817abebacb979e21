"""Shared dependencies for API routes."""

from models.schemas.vocabulary import SkillVocabulary
from services.vocabulary import get_default_vocabulary


def get_vocabulary() -> SkillVocabulary:
    return get_default_vocabulary()
