from typing import Optional

from .schemas import RelayError


class RelayException(Exception):
    """Any failure surfaced to the caller as a 500 with a RelayError body."""

    status_code = 500

    def __init__(self, error: str, details: Optional[str] = None, stripe_status: Optional[int] = None):
        super().__init__(error)
        self.error = error
        self.details = details
        self.stripe_status = stripe_status

    def to_model(self) -> RelayError:
        return RelayError(error=self.error, details=self.details, stripe_status=self.stripe_status)


class MissingCredentialError(RelayException):
    def __init__(self):
        super().__init__("Missing STRIPE_SECRET_KEY environment variable")


class StripeAPIError(RelayException):
    """Stripe answered with a non-success status."""

    def __init__(self, stripe_status: int, details: str):
        super().__init__("Failed to create payment intent", details=details, stripe_status=stripe_status)
