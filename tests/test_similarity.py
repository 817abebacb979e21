import pytest

from services.similarity import cosine_similarity, extract_tfidf_keywords


def test_cosine_similarity_identical():
    v = [0.3, -1.2, 4.0]
    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_cosine_similarity_magnitude_independent():
    assert cosine_similarity([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)


def test_cosine_similarity_orthogonal():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)


def test_cosine_similarity_opposite():
    assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)


def test_cosine_similarity_zero_vector():
    assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0
    assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


def test_cosine_similarity_shape_mismatch():
    with pytest.raises(ValueError):
        cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])


def test_extract_tfidf_keywords():
    jd = """Senior Full-Stack Engineer. Requirements: Python, TypeScript,
    React, AWS, Docker, Kubernetes, PostgreSQL, microservices, CI/CD pipelines,
    system design, 5+ years experience."""
    keywords = extract_tfidf_keywords(jd, top_n=20)
    assert 0 < len(keywords) <= 20
    assert "kubernetes" in keywords


def test_extract_tfidf_keywords_deterministic():
    jd = "Kafka streaming platform engineer building Kafka connectors in Scala"
    assert extract_tfidf_keywords(jd, top_n=5) == extract_tfidf_keywords(jd, top_n=5)


def test_extract_tfidf_keywords_empty():
    assert extract_tfidf_keywords("") == []
    assert extract_tfidf_keywords("the and of") == []
