from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from pricing_service.api import prices
from pricing_service.core.config import settings
from pricing_service.core.exceptions import NotFoundError
from pricing_service.core.redis import init_redis, close_redis, get_redis
from pricing_service.core.metrics import request_count, request_duration, endpoint_label, redis_connected, get_metrics_text
from pricing_service.db.session import init_db, AsyncSessionLocal
from pricing_service.services.pricing import seed_prices
import time
import logging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        status = 500

        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            endpoint = endpoint_label(request)
            request_count.labels(
                method=request.method,
                endpoint=endpoint,
                status=status
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=endpoint
            ).observe(time.time() - start_time)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Pricing service starting...")

    await init_db()
    if settings.SEED_PRICES > 0:
        async with AsyncSessionLocal() as db:
            await seed_prices(db, settings.SEED_PRICES)

    try:
        redis_connected.set(1 if await init_redis() is not None else 0)
    except Exception as e:
        logger.error(f"Redis connection failed, caching disabled: {e}")
        redis_connected.set(0)

    yield

    logger.info("Pricing service shutting down...")
    await close_redis()
    redis_connected.set(0)
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(prices.router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check():
    return {
        "status": "healthy",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "dependencies": {
            "redis": "connected" if get_redis() is not None else "disabled",
            "database": "connected"
        }
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pricing_service.main:app", host="0.0.0.0", port=8082, reload=True)
