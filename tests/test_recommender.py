"""Tests for embedding-based job ranking."""

import math

import pytest

from models.policy import RankingPolicy
from models.schemas.profiles import CandidateProfile, JobPosting
from services.recommender import (
    DIMENSION_MISMATCH,
    ProfileNotReady,
    RankingCancelled,
    find_skipped_postings,
    rank_jobs_for_candidate,
    rank_jobs_partitioned,
    score_posting,
)


def _candidate(**kwargs) -> CandidateProfile:
    fields = {"id": "cand-1", "embedding": [1.0, 0.0], "location": "Berlin"}
    fields.update(kwargs)
    return CandidateProfile(**fields)


def _postings(n: int) -> list[JobPosting]:
    """Postings whose similarity to [1, 0] decreases with their index."""
    return [
        JobPosting(id=f"job-{i}", embedding=[math.cos(i * 0.1), math.sin(i * 0.1)])
        for i in range(n)
    ]


def test_location_boost_and_order():
    candidate = _candidate()
    a = JobPosting(id="A", embedding=[1.0, 0.0], location="berlin")
    b = JobPosting(id="B", embedding=[0.0, 1.0], location="Paris")

    ranked = rank_jobs_for_candidate(candidate, [b, a])

    assert [r.job_posting_id for r in ranked] == ["A", "B"]
    assert ranked[0].similarity_score == pytest.approx(1.2)
    assert ranked[1].similarity_score == pytest.approx(0.0)


def test_requirements_boost():
    candidate = _candidate(location="", skills_text="Python")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], requirements_text="We need PYTHON and SQL")
    assert score_posting(candidate, posting) == pytest.approx(0.3)


def test_requirements_boost_from_education():
    candidate = _candidate(location="", skills_text="Haskell", education_text="Computer Science")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], requirements_text="Degree in computer science")
    assert score_posting(candidate, posting) == pytest.approx(0.3)


def test_requirements_boost_applied_once():
    candidate = _candidate(location="", skills_text="Python", education_text="Python")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], requirements_text="python")
    assert score_posting(candidate, posting) == pytest.approx(0.3)


def test_empty_profile_text_matches_any_requirements():
    candidate = _candidate(location="", skills_text="", education_text="")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], requirements_text="python")
    assert score_posting(candidate, posting) == pytest.approx(0.3)


def test_no_requirements_text_gets_no_boost():
    candidate = _candidate(location="", skills_text="", education_text="")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], requirements_text="")
    assert score_posting(candidate, posting) == 0.0


def test_unmatched_profile_text_gets_no_boost():
    candidate = _candidate(location="", skills_text="Haskell", education_text="Botany")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], requirements_text="Python and SQL")
    assert score_posting(candidate, posting) == 0.0


def test_empty_locations_get_no_boost():
    candidate = _candidate(location="")
    posting = JobPosting(id="A", embedding=[0.0, 1.0], location="")
    assert score_posting(candidate, posting) == 0.0


def test_scores_can_exceed_one():
    candidate = _candidate(skills_text="Python")
    posting = JobPosting(
        id="A", embedding=[2.0, 0.0], location="Berlin", requirements_text="Python"
    )
    assert score_posting(candidate, posting) == pytest.approx(1.5)


def test_custom_policy():
    policy = RankingPolicy(location_boost=0.5, requirements_boost=0.0)
    candidate = _candidate()
    posting = JobPosting(id="A", embedding=[0.0, 1.0], location="Berlin")
    assert score_posting(candidate, posting, policy) == pytest.approx(0.5)


@pytest.mark.parametrize("embedding", [None, []])
def test_missing_embedding_raises_profile_not_ready(embedding):
    candidate = _candidate(embedding=embedding)
    with pytest.raises(ProfileNotReady) as exc_info:
        rank_jobs_for_candidate(candidate, _postings(3))
    assert exc_info.value.retryable
    assert exc_info.value.candidate_id == "cand-1"


def test_default_top_ten():
    ranked = rank_jobs_for_candidate(_candidate(location=""), _postings(15))
    assert len(ranked) == 10
    assert [r.job_posting_id for r in ranked] == [f"job-{i}" for i in range(10)]


def test_top_n():
    assert len(rank_jobs_for_candidate(_candidate(), _postings(15), top_n=3)) == 3
    assert rank_jobs_for_candidate(_candidate(), _postings(15), top_n=0) == []


def test_fewer_postings_than_top_n():
    assert len(rank_jobs_for_candidate(_candidate(), _postings(4))) == 4


def test_no_postings():
    assert rank_jobs_for_candidate(_candidate(), []) == []


def test_sorted_descending():
    postings = list(reversed(_postings(12)))
    ranked = rank_jobs_for_candidate(_candidate(), postings, top_n=12)
    scores = [r.similarity_score for r in ranked]
    assert scores == sorted(scores, reverse=True)


def test_idempotent():
    candidate = _candidate()
    postings = _postings(15)
    assert rank_jobs_for_candidate(candidate, postings) == rank_jobs_for_candidate(candidate, postings)


def test_ties_keep_input_order():
    postings = [JobPosting(id=name, embedding=[1.0, 1.0]) for name in ("c", "a", "b")]
    ranked = rank_jobs_for_candidate(_candidate(), postings)
    assert [r.job_posting_id for r in ranked] == ["c", "a", "b"]


def test_dimension_mismatch_skipped():
    postings = [
        JobPosting(id="ok", embedding=[1.0, 0.0]),
        JobPosting(id="wide", embedding=[1.0, 0.0, 0.0]),
        JobPosting(id="none"),
    ]
    ranked = rank_jobs_for_candidate(_candidate(), postings)
    assert [r.job_posting_id for r in ranked] == ["ok"]

    skipped = find_skipped_postings(_candidate(), postings)
    assert [(s.job_posting_id, s.actual_dim) for s in skipped] == [("wide", 3), ("none", 0)]
    assert all(s.reason == DIMENSION_MISMATCH and s.expected_dim == 2 for s in skipped)


def test_none_arguments_raise():
    with pytest.raises(TypeError):
        rank_jobs_for_candidate(None, [])
    with pytest.raises(TypeError):
        rank_jobs_for_candidate(_candidate(), None)


def test_cancellation():
    calls = []

    def should_cancel():
        calls.append(1)
        return len(calls) > 2

    with pytest.raises(RankingCancelled):
        rank_jobs_for_candidate(_candidate(), _postings(10), should_cancel=should_cancel)
    assert len(calls) == 3


class TestRankJobsPartitioned:
    def test_matches_sequential(self):
        candidate = _candidate()
        postings = _postings(25) + [JobPosting(id="dup", embedding=[1.0, 0.0])]
        sequential = rank_jobs_for_candidate(candidate, postings, top_n=7)
        partitioned = rank_jobs_partitioned(candidate, postings, top_n=7, chunk_size=4)
        assert partitioned == sequential

    def test_ties_across_chunks_keep_input_order(self):
        postings = [JobPosting(id=f"t{i}", embedding=[1.0, 1.0]) for i in range(9)]
        ranked = rank_jobs_partitioned(_candidate(), postings, top_n=5, chunk_size=2)
        assert [r.job_posting_id for r in ranked] == ["t0", "t1", "t2", "t3", "t4"]

    def test_single_chunk(self):
        candidate = _candidate()
        postings = _postings(5)
        assert rank_jobs_partitioned(candidate, postings) == rank_jobs_for_candidate(candidate, postings)

    def test_profile_not_ready(self):
        with pytest.raises(ProfileNotReady):
            rank_jobs_partitioned(_candidate(embedding=None), _postings(20), chunk_size=5)
