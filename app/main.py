from contextlib import asynccontextmanager
import asyncio
import logging
import sqlalchemy
from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

from app.core.database import database
from app.api import logs, reports, sectors, sentiment
from app.middlewares.access_logger import AccessLoggingMiddleware
from app.middlewares.logging import setup_logging
from app.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from app.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)
from app.utils.telemetry import setup_observability
from app.core.config import settings


logger = logging.getLogger(__name__)
is_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    global is_ready

    max_retries = 10
    delay_seconds = 3

    for attempt in range(max_retries):
        try:
            async with database.engine.connect() as conn:
                await conn.execute(sqlalchemy.text("SELECT 1"))
            logger.info("✅ Successfully connected to the database!")
            is_ready = True
            break
        except Exception as e:
            logger.warning(
                f"❌ Database not ready (attempt {attempt + 1}/{max_retries}) - {e}"
            )
            await asyncio.sleep(delay_seconds)
    else:
        raise RuntimeError("🚨 Could not connect to the database after retries!")

    yield

    await database.engine.dispose()


# ✅ SETUP LOGGING FIRST
setup_logging()


app = FastAPI(
    title="Uganda Insights API",
    description="Market-sentiment analytics for Ugandan industry sectors",
    version="1.0.0",
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)

if settings.ENV == "production":
    setup_observability(app, sqlalchemy_engine=database.sync_engine)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(sentiment.router)
app.include_router(sectors.router)
app.include_router(reports.router)
app.include_router(logs.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


@app.api_route("/readiness", methods=["GET", "HEAD"], status_code=200)
def readiness():
    return {"status": "ready"} if is_ready else Response(status_code=503)


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
