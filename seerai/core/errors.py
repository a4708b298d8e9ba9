# seerai/core/errors.py


class TarotError(Exception):
    """Base class for failures raised by the reading pipeline."""


class ValidationError(TarotError, ValueError):
    """The caller sent a malformed reading request. Safe to show to the client."""


class GatewayError(TarotError):
    """The language model call failed or returned nothing usable."""
