# core/errors.py


class RaytracerError(Exception):
    """Base class for all renderer errors."""


class DegenerateVectorError(RaytracerError, ValueError):
    """Raised when a zero-length vector is normalized."""


class SamplingError(RaytracerError):
    """Raised when a rejection-sampling loop runs out of attempts."""


class ConfigError(RaytracerError, ValueError):
    """Raised for invalid render settings."""
