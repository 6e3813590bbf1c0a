"""ProjectGate domain error hierarchy.

All service-layer errors inherit from ProjectGateError. The global exception
handler in main.py converts these to structured JSON responses with the
correct HTTP status code, the offending field (when there is one) and a
request_id for traceability.
"""


class ProjectGateError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "", field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(ProjectGateError):
    status_code = 404
    code = "NOT_FOUND"


class MethodNotAllowedError(ProjectGateError):
    status_code = 405
    code = "METHOD_NOT_ALLOWED"


class ConflictError(ProjectGateError):
    status_code = 409
    code = "CONFLICT"


class ValidationError(ProjectGateError):
    status_code = 422
    code = "VALIDATION_ERROR"


class MissingRequiredError(ValidationError):
    code = "MISSING_REQUIRED"

    def __init__(self, field: str, message: str = "") -> None:
        super().__init__(message or f"{field} is required", field=field)


class MaxLimitExceededError(ValidationError):
    code = "MAX_LIMIT_EXCEEDED"


class ConversionError(ValidationError):
    code = "INVALID_FORMAT"


class QuantityParseError(ValidationError):
    code = "INVALID_QUANTITY"
