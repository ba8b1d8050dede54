from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from vehicles_api.api import cars
from vehicles_api.core.config import settings
from vehicles_api.core.exceptions import NotFoundError
from vehicles_api.core.http import init_http_clients, close_http_clients
from vehicles_api.core.metrics import request_count, request_duration, endpoint_label, get_metrics_text
from vehicles_api.db.session import init_db
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
    logger.info("Vehicles API starting...")

    await init_db()
    logger.info("Database ready")

    await init_http_clients()

    yield

    logger.info("Vehicles API shutting down...")
    await close_http_clients()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(cars.router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": errors}
    )


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
            "pricing": settings.PRICING_ENDPOINT,
            "maps": settings.MAPS_ENDPOINT,
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
    uvicorn.run("vehicles_api.main:app", host="0.0.0.0", port=8080, reload=True)
