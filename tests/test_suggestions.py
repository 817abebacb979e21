from models.policy import ScoringPolicy
from models.schemas.parsed_job import ExperienceLevel, ParsedJobDescription
from models.schemas.parsed_resume import ParsedResume
from services.suggestions import SuggestionContext, build_suggestions, has_quantified_result


def _context(vocab, resume=None, job=None, missing=None, policy=None) -> SuggestionContext:
    return SuggestionContext(
        resume=resume or _good_resume(),
        job=job or ParsedJobDescription(required_skills={"Python"}),
        missing_keywords=missing or set(),
        vocabulary=vocab,
        policy=policy or ScoringPolicy(),
    )


def _good_resume(**overrides) -> ParsedResume:
    fields = dict(
        raw_text="Strong communication with product teams",
        skills={"Python"},
        experience_entries=["Acme 2020 - 2022, served 2M users"],
        education_entries=["B.Sc. Computer Science"],
        sections_found=["education", "experience", "skills"],
    )
    fields.update(overrides)
    return ParsedResume(**fields)


def test_no_gaps_no_suggestions(vocab):
    assert build_suggestions(_context(vocab)) == []


def test_missing_keywords_listed_sorted(vocab):
    suggestions = build_suggestions(_context(vocab, missing={"Kafka", "GraphQL"}))
    assert len(suggestions) == 1
    assert "GraphQL, Kafka" in suggestions[0]


def test_missing_keywords_capped(vocab):
    missing = {"A1", "B2", "C3", "D4", "E5", "F6", "G7"}
    suggestion = build_suggestions(_context(vocab, missing=missing))[0]
    assert "A1, B2, C3, D4, E5" in suggestion
    assert "F6" not in suggestion


def test_quantify_when_no_numbers(vocab):
    resume = _good_resume(experience_entries=["Engineer, Acme, 2019 - 2022\n• Built services"])
    suggestions = build_suggestions(_context(vocab, resume=resume))
    assert any("Quantify" in s for s in suggestions)


def test_has_quantified_result():
    assert not has_quantified_result("Acme 2019 - 2022")
    assert not has_quantified_result("Acme, Jan 2020 - Present")
    assert has_quantified_result("Acme, Jan 2020 - Present, grew revenue 3x")
    assert has_quantified_result("Cut latency by 40%")


def test_soft_skills_missing(vocab):
    resume = _good_resume(raw_text="Python services")
    suggestions = build_suggestions(_context(vocab, resume=resume))
    assert len(suggestions) == 1
    assert "communication" in suggestions[0].lower()


def test_overqualified_for_entry_role(vocab):
    resume = _good_resume(experience_entries=["a 1", "b 2", "c 3"])
    job = ParsedJobDescription(required_skills={"Python"}, experience_level=ExperienceLevel.ENTRY)
    suggestions = build_suggestions(_context(vocab, resume=resume, job=job))
    assert any("overqualified" in s for s in suggestions)


def test_never_overqualified_for_senior_role(vocab):
    resume = _good_resume(experience_entries=[f"job {i}" for i in range(20)])
    job = ParsedJobDescription(required_skills={"Python"}, experience_level=ExperienceLevel.SENIOR)
    assert build_suggestions(_context(vocab, resume=resume, job=job)) == []


def test_missing_education(vocab):
    resume = _good_resume(education_entries=[])
    suggestions = build_suggestions(_context(vocab, resume=resume))
    assert suggestions == ["Add an education section with your degree, institution and graduation year"]


def test_missing_skills_section(vocab):
    resume = _good_resume(sections_found=["experience"], skills=set())
    suggestions = build_suggestions(_context(vocab, resume=resume))
    assert len(suggestions) == 1
    assert "skills section" in suggestions[0]
    assert "Python" in suggestions[0]


def test_rule_order_is_stable(vocab):
    resume = ParsedResume(raw_text="Acme", experience_entries=["Acme 2019 - 2022"] * 3)
    job = ParsedJobDescription(required_skills={"Python"}, experience_level=ExperienceLevel.ENTRY)
    suggestions = build_suggestions(_context(vocab, resume=resume, job=job, missing={"Python"}))
    assert [s.split()[0] for s in suggestions] == [
        "Add", "Quantify", "Mention", "Your", "Add", "Add",
    ]
    assert "keywords" in suggestions[0]
    assert "education" in suggestions[4]
    assert "skills section" in suggestions[5]
