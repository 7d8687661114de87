"""Async client for a deployed rating API"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from rating_api.core.config import settings

logger = logging.getLogger(__name__)


class InconsistentPricingError(Exception):
    pass


class DuplicateQuoteIdError(Exception):
    pass


class QuoteRequestFailedError(Exception):
    pass


@dataclass
class QuoteResult:
    status_code: int
    body: Optional[Any]

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @property
    def premium(self) -> Optional[float]:
        if self.ok and isinstance(self.body, dict):
            return self.body.get("premium")
        return None

    @property
    def quote_id(self) -> Optional[str]:
        if self.ok and isinstance(self.body, dict):
            return self.body.get("quoteId")
        return None

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.body, dict):
            return self.body.get("error")
        return None


class RatingClient:
    """
    Thin wrapper over httpx.AsyncClient.

    Error statuses come back as a QuoteResult rather than raising, so callers
    can assert on the error body. Transport failures still raise httpx errors.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.RATING_API_URL,
            timeout=timeout or settings.CLIENT_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "RatingClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def get_quote(self, payload: dict) -> QuoteResult:
        response = await self._client.post("/", json=payload)
        try:
            body = response.json()
        except ValueError:
            body = None
        if response.status_code != 200:
            logger.debug(f"Quote request returned {response.status_code}: {body}")
        return QuoteResult(status_code=response.status_code, body=body)

    async def check_consistent_pricing(self, payload: dict) -> float:
        first = await self.get_quote(payload)
        second = await self.get_quote(payload)
        if first.premium != second.premium:
            raise InconsistentPricingError(
                f"Premium changed between identical requests: {first.premium} != {second.premium}"
            )
        return first.premium

    async def collect_quote_ids(self, payload: dict, iterations: int = 5) -> set:
        quote_ids = set()
        for attempt in range(1, iterations + 1):
            result = await self.get_quote(payload)
            if not result.ok:
                raise QuoteRequestFailedError(
                    f"Quote request {attempt}/{iterations} failed with {result.status_code}"
                )
            if result.quote_id in quote_ids:
                raise DuplicateQuoteIdError(f"Quote id {result.quote_id} was issued twice")
            quote_ids.add(result.quote_id)
        return quote_ids
