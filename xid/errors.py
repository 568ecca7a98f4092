"""XID validation errors."""

from utils.timestamp import format_timestamp


class XIDError(ValueError):
    """Base error with context and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class InvalidLength(XIDError):
    """Binary payload is not exactly 12 bytes."""

    def __init__(self, message="XID data must be exactly 12 bytes", length=None, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        super().__init__(message, context=context, **kwargs)


class InvalidString(XIDError):
    """Text is not 20 characters from the XID alphabet."""

    def __init__(self, message="Invalid XID string format", value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
