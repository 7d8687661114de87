from pydantic import BaseModel, ConfigDict, Field
from rating_api.core.enums import StateCode, BusinessType


class QuoteRequest(BaseModel):
    revenue: float
    state: StateCode
    business: BusinessType


class QuoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    premium: float
    quote_id: str = Field(alias="quoteId")
    calculated_at: str = Field(alias="calculatedAt")


class ErrorResponse(BaseModel):
    error: str
    message: str
