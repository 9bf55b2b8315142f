from typing import Optional
from fastapi import APIRouter, Depends, Query
import logging

from app.core.database import get_db
from app.messages.report_messages import (
    COMMUNITY_REPORT_CREATED,
    COMMUNITY_REPORT_FAILED,
    LOCATION_AND_REPORT_REQUIRED,
    REPORT_GENERATED,
    REPORT_GENERATION_FAILED,
    REPORTS_FETCH_FAILED,
    REPORTS_FETCHED,
    SECTOR_AND_USER_REQUIRED,
    USER_ID_REQUIRED,
)
from app.messages.sector_messages import SECTOR_NOT_FOUND
from app.schemas.report import (
    CommunityReportOut,
    CommunityReportRequest,
    GeneratedReportOut,
    GenerateReportRequest,
    GenerateReportResponse,
)
from app.services.dashboard_service import sector_by_slug
from app.services.report_service import generate_report, list_reports
from app.services.stats_service import (
    create_community_report,
    list_community_reports,
)
from app.utils.exceptions import BadRequestError, NotFoundError, ServerError
from app.utils.response_builder import success_response
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/api/reports", tags=["Reports"])
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=GenerateReportResponse)
async def generate_sector_report(
    req: GenerateReportRequest, db: AsyncSession = Depends(get_db)
):
    if not req.sector_slug or not req.user_id:
        raise BadRequestError(
            code="SECTOR_AND_USER_REQUIRED", message=SECTOR_AND_USER_REQUIRED
        )

    try:
        sector = await sector_by_slug(db, req.sector_slug)
        if not sector:
            raise NotFoundError(code="SECTOR_NOT_FOUND", message=SECTOR_NOT_FOUND)

        report = await generate_report(
            db, sector=sector, user_id=req.user_id, report_type=req.report_type
        )
        logger.info(f"📄 Generated {report.risk_level}-risk report {report.report_id}")
        return success_response(message=REPORT_GENERATED, data=report)

    except NotFoundError as e:
        raise e
    except Exception as e:
        logger.exception(f"Report generation failed: {e}")
        raise ServerError(
            code="REPORT_GENERATION_FAILED", message=REPORT_GENERATION_FAILED
        )


@router.get("/generate")
async def get_generated_reports(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    if not user_id:
        raise BadRequestError(code="USER_ID_REQUIRED", message=USER_ID_REQUIRED)

    try:
        reports = await list_reports(db, user_id)
    except Exception as e:
        logger.exception(f"Report lookup failed: {e}")
        raise ServerError(code="REPORTS_FETCH_FAILED", message=REPORTS_FETCH_FAILED)

    return success_response(
        message=REPORTS_FETCHED,
        data=[GeneratedReportOut.model_validate(r) for r in reports],
    )


# ===============
# Community reports
# ===============
@router.get("")
async def get_community_reports(db: AsyncSession = Depends(get_db)):
    try:
        reports = await list_community_reports(db)
    except Exception as e:
        logger.exception(f"Community report lookup failed: {e}")
        raise ServerError(code="REPORTS_FETCH_FAILED", message=REPORTS_FETCH_FAILED)

    return success_response(
        message=REPORTS_FETCHED,
        data=[CommunityReportOut.model_validate(r) for r in reports],
    )


@router.post("")
async def post_community_report(
    req: CommunityReportRequest, db: AsyncSession = Depends(get_db)
):
    if not req.location or not req.report:
        raise BadRequestError(
            code="LOCATION_AND_REPORT_REQUIRED", message=LOCATION_AND_REPORT_REQUIRED
        )

    try:
        row = await create_community_report(
            db, location=req.location, report=req.report
        )
    except Exception as e:
        logger.exception(f"Community report creation failed: {e}")
        raise ServerError(
            code="COMMUNITY_REPORT_FAILED", message=COMMUNITY_REPORT_FAILED
        )

    return success_response(
        message=COMMUNITY_REPORT_CREATED,
        data=CommunityReportOut.model_validate(row),
        status_code=201,
    )
