"""
Domain-specific errors for the beacon bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.beacon.entities import AlleleRequest


class BeaconDomainError(Exception):
    """Base error for all beacon domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidAlleleRequestError(BeaconDomainError):
    """Raised when an allele request fails validation.

    Carries the offending request so it can be echoed back to the caller.
    """

    def __init__(self, message: str, request: AlleleRequest) -> None:
        super().__init__(message)
        self.request = request
