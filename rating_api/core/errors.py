"""Client-input errors raised while validating a quote request"""
from rating_api.core.enums import ErrorCategory, StateCode, BusinessType


class QuoteError(Exception):
    category: ErrorCategory = ErrorCategory.MALFORMED_PAYLOAD
    status_code: int = 400
    default_message: str = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.category.value, "message": self.message}


class MissingFieldsError(QuoteError):
    category = ErrorCategory.MISSING_FIELDS
    default_message = "Revenue, state, and business are required"


class InvalidRevenueError(QuoteError):
    category = ErrorCategory.INVALID_REVENUE
    default_message = "Revenue must be a positive number"


class InvalidStateError(QuoteError):
    category = ErrorCategory.INVALID_STATE
    default_message = "State must be one of: " + ", ".join(s.value for s in StateCode)


class InvalidBusinessTypeError(QuoteError):
    category = ErrorCategory.INVALID_BUSINESS_TYPE
    default_message = "Business must be one of: " + ", ".join(b.value for b in BusinessType)


class MalformedPayloadError(QuoteError):
    category = ErrorCategory.MALFORMED_PAYLOAD
    default_message = "Request body must be valid JSON"


class MethodNotAllowedError(QuoteError):
    category = ErrorCategory.METHOD_NOT_ALLOWED
    status_code = 405
    default_message = "Only POST requests are accepted"
