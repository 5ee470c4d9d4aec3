"""Domain errors."""

from nmeta.domain.models.error_details import ErrorDetails


class HeaderValidationError(ValueError):
    """Raised when a metadata header is missing or malformed.

    Callers should answer with a bad request; ``status_code`` carries that.
    """

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_error_details(self) -> ErrorDetails:
        return ErrorDetails(status_code=self.status_code, reason=self.message)
