"""Embedding-based job recommendations for a candidate.

Score = cosine similarity of candidate and posting embeddings, plus
additive boosts for a matching location and for requirements text that
mentions the candidate's skills or education. This is a heuristic
re-ranker, so scores are deliberately left unclamped and can exceed 1.0.
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from config import settings
from models.policy import RankingPolicy
from models.schemas.profiles import CandidateProfile, JobPosting
from models.schemas.recommendation import RankedRecommendation, SkippedPosting
from services.similarity import cosine_similarity

logger = logging.getLogger(__name__)

DIMENSION_MISMATCH = "DimensionMismatch"


class ProfileNotReady(Exception):
    """The candidate has no embedding yet.

    Retryable: the caller should trigger embedding generation for the
    profile and ask again.
    """
    retryable = True

    def __init__(self, candidate_id: str) -> None:
        self.candidate_id = candidate_id
        super().__init__(f"Candidate {candidate_id} has no embedding; generate it and retry")


class RankingCancelled(Exception):
    """Raised when the caller's cancellation check fires mid-ranking."""


def _dim(embedding: Sequence[float] | None) -> int:
    return len(embedding) if embedding else 0


def _require_embedding(candidate: CandidateProfile) -> int:
    dim = _dim(candidate.embedding)
    if dim == 0:
        raise ProfileNotReady(candidate.id)
    return dim


def find_skipped_postings(
    candidate: CandidateProfile, postings: Sequence[JobPosting]
) -> list[SkippedPosting]:
    """Postings whose embedding is missing, empty or the wrong length."""
    expected = _require_embedding(candidate)
    return [
        SkippedPosting(
            job_posting_id=posting.id,
            reason=DIMENSION_MISMATCH,
            expected_dim=expected,
            actual_dim=_dim(posting.embedding),
        )
        for posting in postings
        if _dim(posting.embedding) != expected
    ]


def _location_matches(candidate: CandidateProfile, posting: JobPosting) -> bool:
    if not candidate.location or not posting.location:
        return False
    return candidate.location.strip().lower() == posting.location.strip().lower()


def _requirements_match(candidate: CandidateProfile, posting: JobPosting) -> bool:
    # Empty profile text matches any non-empty requirements text
    requirements = posting.requirements_text.lower()
    if not requirements:
        return False
    return any(
        text.strip().lower() in requirements
        for text in (candidate.skills_text, candidate.education_text)
    )


def score_posting(
    candidate: CandidateProfile,
    posting: JobPosting,
    policy: RankingPolicy | None = None,
) -> float:
    """Heuristic match score of one posting. Assumes equal-length embeddings."""
    policy = policy or settings.ranking
    score = cosine_similarity(candidate.embedding, posting.embedding)
    if _location_matches(candidate, posting):
        score += policy.location_boost
    if _requirements_match(candidate, posting):
        score += policy.requirements_boost
    return score


def rank_jobs_for_candidate(
    candidate: CandidateProfile,
    postings: Sequence[JobPosting],
    top_n: int | None = None,
    policy: RankingPolicy | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> list[RankedRecommendation]:
    """Rank postings for a candidate, best first.

    Raises ProfileNotReady if the candidate has no embedding. Postings
    with unusable embeddings are skipped and logged. Ties keep the order
    the postings were given in. ``should_cancel`` is polled once per
    posting, between scores, and raises RankingCancelled when it fires.
    """
    if candidate is None or postings is None:
        raise TypeError("candidate and postings are required")
    policy = policy or settings.ranking
    if top_n is None:
        top_n = policy.default_top_n

    expected = _require_embedding(candidate)

    scored: list[RankedRecommendation] = []
    for posting in postings:
        if should_cancel is not None and should_cancel():
            raise RankingCancelled(f"Ranking for candidate {candidate.id} cancelled")

        actual = _dim(posting.embedding)
        if actual != expected:
            logger.warning(
                "Skipping posting %s: %s (expected %d dims, got %d)",
                posting.id, DIMENSION_MISMATCH, expected, actual,
            )
            continue

        scored.append(RankedRecommendation(
            job_posting_id=posting.id,
            similarity_score=score_posting(candidate, posting, policy),
        ))

    # sort() is stable, so equal scores keep input order
    scored.sort(key=lambda r: r.similarity_score, reverse=True)
    logger.debug("Ranked %d of %d postings for candidate %s", len(scored), len(postings), candidate.id)
    return scored[:max(top_n, 0)]


def rank_jobs_partitioned(
    candidate: CandidateProfile,
    postings: Sequence[JobPosting],
    top_n: int | None = None,
    policy: RankingPolicy | None = None,
    workers: int = 4,
    chunk_size: int = 500,
    should_cancel: Callable[[], bool] | None = None,
) -> list[RankedRecommendation]:
    """Rank a large posting collection across a thread pool.

    Each chunk is ranked independently; the partial top-N lists are
    concatenated in chunk order, re-sorted and re-truncated, which gives
    the same result as ``rank_jobs_for_candidate`` on the whole list.
    """
    policy = policy or settings.ranking
    if top_n is None:
        top_n = policy.default_top_n
    _require_embedding(candidate)

    chunks = [postings[i:i + chunk_size] for i in range(0, len(postings), chunk_size)]
    if len(chunks) <= 1:
        return rank_jobs_for_candidate(candidate, postings, top_n, policy, should_cancel)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        partials = list(pool.map(
            lambda chunk: rank_jobs_for_candidate(candidate, chunk, top_n, policy, should_cancel),
            chunks,
        ))

    merged = [rec for partial in partials for rec in partial]
    merged.sort(key=lambda r: r.similarity_score, reverse=True)
    return merged[:max(top_n, 0)]
