"""Vector similarity and TF-IDF term discovery."""

import logging
from collections.abc import Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

logger = logging.getLogger(__name__)


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Cosine similarity of two equal-length vectors.

    Returns 0.0 when either vector has zero magnitude instead of raising.
    """
    a = np.asarray(vec_a, dtype=np.float64)
    b = np.asarray(vec_b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Vector shapes differ: {a.shape} vs {b.shape}")

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def extract_tfidf_keywords(text: str, top_n: int = 20) -> list[str]:
    """Extract top single-word keywords from text using TF-IDF scores.

    Uses a small reference corpus of generic filler text to compute IDF,
    making distinctive terms in the input text stand out. Ties keep
    vocabulary order so the result is deterministic.
    """
    if not text.strip() or top_n <= 0:
        return []

    # Reference corpus to provide IDF contrast
    reference = [
        "the candidate should have experience and skills in relevant areas",
        "looking for a professional with strong background and qualifications",
        "requirements include working with teams and delivering results",
    ]

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=3000,
        sublinear_tf=True,
        token_pattern=r"(?u)\b[a-zA-Z][a-zA-Z-]+\b",
    )

    try:
        tfidf_matrix = vectorizer.fit_transform([text] + reference)
    except ValueError:
        # Only stopwords in the input
        return []

    feature_names = vectorizer.get_feature_names_out()
    scores = tfidf_matrix[0].toarray().flatten()

    top_indices = np.argsort(-scores, kind="stable")[:top_n]
    return [
        feature_names[i]
        for i in top_indices
        if scores[i] > 0 and len(feature_names[i]) > 2
    ]
