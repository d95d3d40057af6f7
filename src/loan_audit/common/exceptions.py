"""Custom exceptions for the loan agreement audit core."""


class AuditError(Exception):
    """Base exception for loan audit errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
        }


class SchemaViolation(AuditError):
    """A required section or field of the analysis payload is missing or mistyped."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        expected_type: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.path = path
        self.expected_type = expected_type

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = super().to_dict()
        result.update({
            "path": self.path,
            "expectedType": self.expected_type,
        })
        return result


class IntelligenceError(AuditError):
    """Error calling or decoding the document intelligence model."""

    def __init__(
        self,
        message: str,
        model_id: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.model_id = model_id

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = super().to_dict()
        result["modelId"] = self.model_id
        return result
