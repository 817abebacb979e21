"""Skill vocabulary loading.

The extractor functions take a ``SkillVocabulary`` argument; this module
only provides the file loader and a lazily-loaded default for callers
that don't inject their own.
"""

import json
import logging
from pathlib import Path

from config import settings
from models.schemas.vocabulary import SkillVocabulary

logger = logging.getLogger(__name__)

BUNDLED_VOCABULARY_PATH = Path(__file__).parent / "data" / "skill_vocabulary.json"

# Loaded on first use
_default_vocabulary: SkillVocabulary | None = None


def load_vocabulary(path: str | Path) -> SkillVocabulary:
    """Load and validate a vocabulary JSON file.

    Raises ``pydantic.ValidationError`` if the file does not match the schema.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    vocabulary = SkillVocabulary.model_validate(data)
    logger.info(
        "Loaded skill vocabulary %s from %s (%d skills, %d synonyms, %d domain terms)",
        vocabulary.version,
        path,
        len(vocabulary.skills),
        len(vocabulary.synonyms),
        len(vocabulary.domain_terms),
    )
    return vocabulary


def get_default_vocabulary() -> SkillVocabulary:
    """Return the configured vocabulary, loading it on first call."""
    global _default_vocabulary
    if _default_vocabulary is None:
        path = settings.skill_vocabulary_path or BUNDLED_VOCABULARY_PATH
        _default_vocabulary = load_vocabulary(path)
    return _default_vocabulary


def clear() -> None:
    """Drop the cached default vocabulary. Useful for testing."""
    global _default_vocabulary
    _default_vocabulary = None
