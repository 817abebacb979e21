"""Shared test configuration and fixtures."""

import pytest

from models.schemas.vocabulary import SkillVocabulary


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: runs the full pipeline against the bundled vocabulary"
    )


@pytest.fixture
def vocab() -> SkillVocabulary:
    """Small fixture vocabulary, independent of the bundled data file."""
    return SkillVocabulary(
        version="test-1",
        skills=[
            "Python", "Java", "JavaScript", "TypeScript", "React", "Node.js",
            "GraphQL", "Docker", "Kubernetes", "AWS", "PostgreSQL", "SQL",
            "MySQL", "Kafka", "Scala", "C++", "Machine Learning",
        ],
        synonyms={
            "k8s": "Kubernetes",
            "postgres": "PostgreSQL",
            "nodejs": "Node.js",
            "js": "JavaScript",
            "ml": "Machine Learning",
        },
        domain_terms=["Backend", "Payments", "Distributed Systems"],
        soft_skills=["communication", "teamwork", "collaboration"],
    )
