"""Core exceptions for AssertPack."""


class AssertPackError(Exception):
    """Base class for assertpack errors."""


class EngineConfigError(AssertPackError, ValueError):
    """Invalid engine configuration."""


class PayloadError(AssertPackError):
    """Explain payload is malformed or names an unknown kind."""
