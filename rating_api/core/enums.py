from enum import Enum


class StateCode(str, Enum):
    CA = "CA"
    TX = "TX"
    NY = "NY"
    WI = "WI"
    OH = "OH"
    IL = "IL"
    NV = "NV"

    def __str__(self):
        return self.value


class BusinessType(str, Enum):
    RETAIL = "retail"
    RESTAURANT = "restaurant"
    PROFESSIONAL = "professional"
    MANUFACTURING = "manufacturing"

    def __str__(self):
        return self.value


class ErrorCategory(str, Enum):
    MISSING_FIELDS = "Missing required fields"
    INVALID_REVENUE = "Invalid revenue"
    INVALID_STATE = "Invalid state"
    INVALID_BUSINESS_TYPE = "Invalid business type"
    MALFORMED_PAYLOAD = "Invalid JSON"
    METHOD_NOT_ALLOWED = "Method not allowed"

    def __str__(self):
        return self.value
