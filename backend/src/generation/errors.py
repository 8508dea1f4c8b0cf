"""Typed failures of the generation workflow, each carrying its HTTP status."""


class GenerationError(Exception):
    """Base class. Translated to a JSON error response by the app's exception handler."""

    status_code = 500
    default_detail = "Something went wrong"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthorized(GenerationError):
    status_code = 401
    default_detail = "Authentication required"


class InvalidInput(GenerationError):
    status_code = 400
    default_detail = "Invalid input"


class PaymentRequired(GenerationError):
    status_code = 402
    default_detail = "User has not paid or is out of credits"


class ConfigurationError(GenerationError):
    status_code = 500
    default_detail = "Completion API credentials are not configured"


class UpstreamError(GenerationError):
    status_code = 500
