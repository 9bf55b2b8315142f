from fastapi import APIRouter, Depends, Request
import logging

from app.core.config import settings
from app.core.database import get_db
from app.core.keywords.extractor import KeywordExtractor
from app.core.sentiment.analyzer import analyzer_for
from app.core.sentiment.config import SentimentConfig
from app.messages.analysis_messages import (
    ANALYSIS_FAILED,
    SENTIMENT_ANALYSIS_SUCCESS,
    TEXT_REQUIRED,
)
from app.middlewares.security import limiter
from app.schemas.sentiment import (
    SentimentAnalysisData,
    SentimentAnalysisResponse,
    SentimentRequest,
    SentimentScoreData,
)
from app.services.sentiment_service import SentimentObservation, SentimentService
from app.utils.exceptions import BadRequestError, ServerError
from app.utils.response_builder import success_response
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/api/sentiment", tags=["Sentiment"])
logger = logging.getLogger(__name__)


def _service() -> SentimentService:
    return SentimentService(
        analyzer=analyzer_for(SentimentConfig()),
        keywords=KeywordExtractor(),
    )


@router.post("/analyze", response_model=SentimentAnalysisResponse)
@limiter.limit(lambda: settings.ANALYZE_RATE_LIMIT)
async def analyze_sentiment(
    request: Request,
    body: SentimentRequest,
    db: AsyncSession = Depends(get_db),
    service: SentimentService = Depends(_service),
):
    if not body.text:
        raise BadRequestError(code="TEXT_REQUIRED", message=TEXT_REQUIRED)

    try:
        result = await service.analyze(
            db, SentimentObservation(text=body.text, sector_id=body.sector_id)
        )
    except Exception as e:
        logger.exception(f"❌ Sentiment analysis failed: {e}")
        raise ServerError(code="SENTIMENT_ANALYSIS_FAILED", message=ANALYSIS_FAILED)

    return success_response(
        message=SENTIMENT_ANALYSIS_SUCCESS,
        data=SentimentAnalysisData(
            sentiment=SentimentScoreData(**result.sentiment.as_dict()),
            keywords=result.keywords,
            analyzed_at=result.analyzed_at,
        ),
    )
