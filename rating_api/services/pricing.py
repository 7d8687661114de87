"""
Premium calculation for small commercial quotes.

premium = revenue * BASE_RATE * business multiplier * state multiplier,
rounded half-up to the cent.
"""
import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from rating_api.core.enums import StateCode, BusinessType
from rating_api.core.errors import (
    MissingFieldsError,
    InvalidRevenueError,
    InvalidStateError,
    InvalidBusinessTypeError,
)
from rating_api.schemas.quote import QuoteRequest, QuoteResponse
from rating_api.services.quote_ids import IdGenerator, QuoteIdGenerator

BASE_RATE = 0.025

BUSINESS_MULTIPLIERS = MappingProxyType({
    BusinessType.RETAIL: 1.0,
    BusinessType.RESTAURANT: 1.3,
    BusinessType.PROFESSIONAL: 0.8,
    BusinessType.MANUFACTURING: 1.5,
})

STATE_MULTIPLIERS = MappingProxyType({
    StateCode.CA: 1.2,
    StateCode.TX: 1.0,
    StateCode.NY: 1.3,
    StateCode.WI: 0.9,
    StateCode.OH: 0.85,
    StateCode.IL: 1.1,
    StateCode.NV: 1.15,
})

VALID_STATES = frozenset(s.value for s in StateCode)
VALID_BUSINESS_TYPES = frozenset(b.value for b in BusinessType)

CENT = Decimal("0.01")


def _validate_revenue(revenue: Any) -> float:
    if isinstance(revenue, bool) or not isinstance(revenue, (int, float)):
        raise InvalidRevenueError()
    try:
        value = float(revenue)
    except OverflowError:
        raise InvalidRevenueError()
    if not math.isfinite(value) or value < 0:
        raise InvalidRevenueError()
    return value


def validate_quote_request(payload: Mapping[str, Any]) -> QuoteRequest:
    """
    Validate and normalize a raw quote payload.

    Checks run in a fixed order and the first failure wins:
    presence, revenue, state, business. An explicit null revenue counts
    as present and is rejected as an invalid revenue.
    """
    state = payload.get("state")
    business = payload.get("business")

    if "revenue" not in payload or not state or not business:
        raise MissingFieldsError()

    revenue = _validate_revenue(payload["revenue"])

    if not isinstance(state, str) or state.upper() not in VALID_STATES:
        raise InvalidStateError()

    if not isinstance(business, str) or business.lower() not in VALID_BUSINESS_TYPES:
        raise InvalidBusinessTypeError()

    return QuoteRequest(
        revenue=revenue,
        state=StateCode(state.upper()),
        business=BusinessType(business.lower()),
    )


def calculate_premium(req: QuoteRequest) -> float:
    raw = (
        Decimal(str(req.revenue))
        * Decimal(str(BASE_RATE))
        * Decimal(str(BUSINESS_MULTIPLIERS[req.business]))
        * Decimal(str(STATE_MULTIPLIERS[req.state]))
    )
    # quantize needs every integer digit plus two decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, raw.adjusted() + 3)
        return float(raw.quantize(CENT, rounding=ROUND_HALF_UP))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RatingEngine:
    """Validates quote payloads, prices them and stamps each result with a fresh id."""

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.id_generator = id_generator or QuoteIdGenerator()
        self.clock = clock or _utc_now

    def quote(self, payload: Mapping[str, Any]) -> QuoteResponse:
        req = validate_quote_request(payload)
        return self.issue(calculate_premium(req))

    def issue(self, premium: float) -> QuoteResponse:
        return QuoteResponse(
            premium=premium,
            quote_id=self.id_generator.next_id(),
            calculated_at=format_timestamp(self.clock()),
        )
