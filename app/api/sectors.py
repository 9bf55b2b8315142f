from fastapi import APIRouter, Depends
import logging

from app.core.database import get_db
from app.messages.sector_messages import (
    DASHBOARD_FETCH_FAILED,
    DASHBOARD_FETCHED,
    SECTOR_NOT_FOUND,
    SECTORS_FETCH_FAILED,
    SECTORS_FETCHED,
)
from app.schemas.sector import DashboardResponse, SectorListResponse, SectorOut
from app.services.dashboard_service import (
    get_sector_dashboard,
    list_sectors,
    sector_by_slug,
)
from app.utils.exceptions import NotFoundError, ServerError
from app.utils.response_builder import success_response
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/api", tags=["Sectors"])
logger = logging.getLogger(__name__)


@router.get("/sectors", response_model=SectorListResponse)
async def get_sectors(db: AsyncSession = Depends(get_db)):
    try:
        sectors = await list_sectors(db)
    except Exception as e:
        logger.exception(f"Fetching sectors failed: {e}")
        raise ServerError(code="SECTORS_FETCH_FAILED", message=SECTORS_FETCH_FAILED)

    return success_response(
        message=SECTORS_FETCHED,
        data=[SectorOut.model_validate(s) for s in sectors],
    )


@router.get("/dashboard/{sector}", response_model=DashboardResponse)
async def get_dashboard(sector: str, db: AsyncSession = Depends(get_db)):
    try:
        sector_row = await sector_by_slug(db, sector)
        if not sector_row:
            raise NotFoundError(code="SECTOR_NOT_FOUND", message=SECTOR_NOT_FOUND)

        data = await get_sector_dashboard(db, sector_row)
        return success_response(message=DASHBOARD_FETCHED, data=data)

    except NotFoundError as e:
        raise e
    except Exception as e:
        logger.exception(f"Dashboard lookup failed for '{sector}': {e}")
        raise ServerError(
            code="DASHBOARD_FETCH_FAILED", message=DASHBOARD_FETCH_FAILED
        )
