from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from rating_api.api import quotes
from rating_api.core.config import settings
from rating_api.core.errors import QuoteError, MethodNotAllowedError
from rating_api.core.redis import init_redis, close_redis, get_redis
from rating_api.core.metrics import request_count, request_duration, redis_connected, get_metrics_text
import time
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            self._record(request, 500, time.time() - start_time)
            raise

        self._record(request, response.status_code, time.time() - start_time)
        return response

    @staticmethod
    def _record(request: Request, status: int, duration: float):
        request_count.labels(
            method=request.method,
            endpoint=request.url.path,
            status=status
        ).inc()
        request_duration.labels(
            method=request.method,
            endpoint=request.url.path
        ).observe(duration)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")

    try:
        connection = await init_redis()
        redis_connected.set(1 if connection is not None else 0)
    except Exception as e:
        logger.error(f"Redis connection failed, premium cache disabled: {e}")
        redis_connected.set(0)

    yield

    logger.info("Application shutting down...")
    await close_redis()
    redis_connected.set(0)
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(quotes.router)


@app.exception_handler(QuoteError)
async def quote_error_handler(request: Request, exc: QuoteError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    err = MethodNotAllowedError()
    return JSONResponse(status_code=err.status_code, content=err.to_dict(), headers=exc.headers)


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
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("rating_api.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
