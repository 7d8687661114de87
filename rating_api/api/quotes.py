"""Quote endpoint with Redis premium caching"""
import json
import hashlib
import logging
from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from rating_api.schemas.quote import QuoteRequest, QuoteResponse, ErrorResponse
from rating_api.services.pricing import RatingEngine, validate_quote_request, calculate_premium
from rating_api.core.errors import QuoteError, MalformedPayloadError
from rating_api.core.metrics import quotes_issued, quote_rejections, cache_hits, cache_misses
from rating_api.core.redis import get_redis
from rating_api.core.config import settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["quotes"])

_engine = RatingEngine()


def get_engine() -> RatingEngine:
    return _engine


def _generate_cache_key(req: QuoteRequest) -> str:
    params_str = json.dumps(req.model_dump(mode="json"), sort_keys=True)
    return f"premium:{hashlib.sha256(params_str.encode()).hexdigest()}"


async def _read_payload(request: Request) -> dict:
    body = await request.body()
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        raise MalformedPayloadError()
    if not isinstance(payload, dict):
        raise MalformedPayloadError("Request body must be a JSON object")
    return payload


async def _get_premium(req: QuoteRequest) -> float:
    cache_key = _generate_cache_key(req)
    redis = get_redis()

    if redis is not None:
        try:
            cached = await redis.get(cache_key)
            if cached is not None:
                cache_hits.inc()
                return float(cached)
        except Exception as e:
            logger.warning(f"Cache retrieval failed: {e}")

    premium = calculate_premium(req)

    if redis is not None:
        cache_misses.inc()
        try:
            await redis.set(cache_key, json.dumps(premium), ex=settings.PREMIUM_CACHE_TTL)
        except Exception as e:
            logger.warning(f"Cache write failed: {e}")

    return premium


@router.post(
    "/",
    response_model=QuoteResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}},
)
async def create_quote(request: Request, engine: RatingEngine = Depends(get_engine)):
    try:
        payload = await _read_payload(request)
        req = validate_quote_request(payload)
    except QuoteError as e:
        quote_rejections.labels(error=e.category.value).inc()
        logger.info(f"Quote rejected: {e.category.value}")
        raise

    premium = await _get_premium(req)
    result = engine.issue(premium)

    quotes_issued.labels(state=req.state.value, business=req.business.value).inc()
    logger.info(f"Quote {result.quote_id} issued: {req.state.value}/{req.business.value} premium={premium}")
    return result


@router.options("/", include_in_schema=False)
async def quote_options():
    return Response(status_code=200)
