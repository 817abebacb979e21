import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_vocabulary
from config import settings
from models.requests import AnalyzeRequest, RecommendationRequest
from models.responses import AnalysisResponse, RecommendationResponse, ReportResponse
from models.schemas.vocabulary import SkillVocabulary
from services import recommender, resume_analyzer
from services.report import render_text_report

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _validate_analyze_request(body: AnalyzeRequest) -> None:
    if len(body.resume_text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume text too long (max {settings.max_resume_chars} chars)",
        )
    if len(body.job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )
    if not body.job_description.strip():
        raise HTTPException(status_code=400, detail="No job description provided")


@router.get("/health")
async def health(vocabulary: SkillVocabulary = Depends(get_vocabulary)):
    return {
        "status": "ok",
        "vocabulary_version": vocabulary.version,
    }


@router.post("/ats/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    body: AnalyzeRequest,
    vocabulary: SkillVocabulary = Depends(get_vocabulary),
):
    _validate_analyze_request(body)
    return resume_analyzer.analyze(
        body.resume_text,
        body.job_description,
        vocabulary=vocabulary,
        resume_file_name=body.resume_file_name,
    )


@router.post("/ats/report", response_model=ReportResponse)
@limiter.limit(settings.rate_limit)
async def report(
    request: Request,
    body: AnalyzeRequest,
    vocabulary: SkillVocabulary = Depends(get_vocabulary),
):
    _validate_analyze_request(body)
    result = resume_analyzer.analyze(
        body.resume_text,
        body.job_description,
        vocabulary=vocabulary,
        resume_file_name=body.resume_file_name,
    )
    return ReportResponse(
        report=render_text_report(result.score, result.keyword_analysis),
        saved_analysis=result.saved_analysis,
    )


@router.post("/recommendations/jobs-for-candidate", response_model=RecommendationResponse)
@limiter.limit(settings.rate_limit)
async def jobs_for_candidate(request: Request, body: RecommendationRequest):
    try:
        recommendations = recommender.rank_jobs_for_candidate(
            body.candidate, body.postings, top_n=body.top_n
        )
    except recommender.ProfileNotReady as e:
        logger.info("Recommendations requested before embedding existed: %s", e.candidate_id)
        raise HTTPException(
            status_code=409,
            detail="Candidate embedding not found. Update the profile to generate it, then retry.",
        )

    return RecommendationResponse(
        recommendations=recommendations,
        skipped=recommender.find_skipped_postings(body.candidate, body.postings),
    )
