"""Custom exceptions for the patterns demo package."""


class EncryptionStrategyNotSet(Exception):
    """Raised when an encryptor is asked to encrypt before a strategy is set."""

    pass


class UnknownRoleKind(ValueError):
    """Raised when no role creator is registered for the requested kind."""

    pass
