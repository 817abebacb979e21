"""Versioned skill vocabulary used by the text feature extractor."""

from pydantic import BaseModel, PrivateAttr


class SkillVocabulary(BaseModel):
    """Lookup table of recognized skills and domain terms.

    Loaded from JSON data rather than baked into the extractor so tests
    can swap in small fixture vocabularies.

    ``synonyms`` maps a lowercase alias to the canonical display name,
    e.g. ``"k8s" -> "Kubernetes"``.
    """
    version: str = "0"
    skills: list[str] = []
    synonyms: dict[str, str] = {}
    domain_terms: list[str] = []
    soft_skills: list[str] = []

    _index: dict[str, str] = PrivateAttr(default_factory=dict)
    _domain_index: dict[str, str] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        for skill in self.skills:
            self._index[skill.lower()] = skill
        for alias, canonical in self.synonyms.items():
            self._index.setdefault(alias.lower(), canonical)
        for term in self.domain_terms:
            self._domain_index[term.lower()] = term

    def canonical(self, term: str) -> str | None:
        """Return the canonical name for a skill or alias, or None if unknown."""
        return self._index.get(term.lower().strip())

    def skill_key(self, term: str) -> str:
        """Case-insensitive comparison key that folds aliases together."""
        return (self.canonical(term) or term.strip()).lower()

    def search_terms(self) -> list[str]:
        """All lowercase surface forms (skills and aliases), longest first."""
        return sorted(self._index, key=lambda t: (-len(t), t))

    def domain_search_terms(self) -> list[str]:
        return sorted(self._domain_index, key=lambda t: (-len(t), t))

    def domain_term(self, term: str) -> str | None:
        return self._domain_index.get(term.lower().strip())
