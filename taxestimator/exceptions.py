"""Custom exceptions for Tax Estimator."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class InvalidArgumentError(TaxComputationError, ValueError):
    """Raised when a caller passes a key outside a closed enumeration."""

    def __init__(self, argument: str, value: object, allowed: list[str] | None = None):
        self.argument = argument
        self.value = value
        self.allowed = allowed or []
        message = f"Invalid {argument}: {value!r}"
        if self.allowed:
            message += f" (expected one of: {', '.join(self.allowed)})"
        super().__init__(message)


class RateScheduleNotFoundError(TaxComputationError):
    """Raised when a jurisdiction has no rate schedule to compute with."""

    def __init__(self, jurisdiction: str, message: str):
        self.jurisdiction = jurisdiction
        super().__init__(f"No rate schedule for {jurisdiction}: {message}")
