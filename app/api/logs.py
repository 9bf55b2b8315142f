from datetime import datetime
from fastapi import APIRouter, Depends
import logging

from app.core.database import get_db
from app.messages.log_messages import (
    INVALID_LOG_TYPE,
    LOG_CREATE_FAILED,
    LOG_CREATED,
    LOGS_FETCH_FAILED,
    LOGS_FETCHED,
    MESSAGE_AND_TYPE_REQUIRED,
    STATS_FETCH_FAILED,
    STATS_FETCHED,
)
from app.models.db.system_log import LOG_TYPES
from app.schemas.log import SystemLogOut, SystemLogRequest
from app.services.stats_service import create_log, get_stats, list_logs
from app.utils.exceptions import BadRequestError, ServerError
from app.utils.response_builder import success_response
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/api", tags=["System"])
logger = logging.getLogger(__name__)


@router.get("/logs")
async def get_logs(db: AsyncSession = Depends(get_db)):
    try:
        logs = await list_logs(db)
    except Exception as e:
        logger.exception(f"Log lookup failed: {e}")
        raise ServerError(code="LOGS_FETCH_FAILED", message=LOGS_FETCH_FAILED)

    return success_response(
        message=LOGS_FETCHED, data=[SystemLogOut.model_validate(l) for l in logs]
    )


@router.post("/logs")
async def post_log(req: SystemLogRequest, db: AsyncSession = Depends(get_db)):
    if not req.message or not req.type:
        raise BadRequestError(
            code="MESSAGE_AND_TYPE_REQUIRED", message=MESSAGE_AND_TYPE_REQUIRED
        )
    if req.type not in LOG_TYPES:
        raise BadRequestError(code="INVALID_LOG_TYPE", message=INVALID_LOG_TYPE)

    try:
        row = await create_log(
            db,
            message=req.message,
            type=req.type,
            time=datetime.now().strftime("%H:%M:%S"),
        )
    except Exception as e:
        logger.exception(f"Log creation failed: {e}")
        raise ServerError(code="LOG_CREATE_FAILED", message=LOG_CREATE_FAILED)

    return success_response(
        message=LOG_CREATED, data=SystemLogOut.model_validate(row), status_code=201
    )


@router.get("/stats")
async def get_statistics(db: AsyncSession = Depends(get_db)):
    try:
        stats = await get_stats(db)
    except Exception as e:
        logger.exception(f"Stats lookup failed: {e}")
        raise ServerError(code="STATS_FETCH_FAILED", message=STATS_FETCH_FAILED)

    return success_response(message=STATS_FETCHED, data=stats)
