from fastapi import FastAPI, Request
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from maps_service.api import maps
from maps_service.core.config import settings
from maps_service.core.metrics import request_count, request_duration, endpoint_label, get_metrics_text
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


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
)

app.add_middleware(MetricsMiddleware)

app.include_router(maps.router)


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
    uvicorn.run("maps_service.main:app", host="0.0.0.0", port=9191, reload=True)
