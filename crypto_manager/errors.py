"""
Exceptions raised by crypto_manager.

Every error is a ValueError subclass so callers that already catch
ValueError around key handling keep working.
"""


class CipherError(ValueError):
    """Base class for crypto_manager errors."""


class OutOfAlphabetError(CipherError):
    """Input holds characters outside the supported band."""

    def __init__(self, invalid):
        self.invalid = list(invalid)
        shown = ", ".join(f"{i}:{c!r}" for i, c in self.invalid[:5])
        more  = f" (+{len(self.invalid) - 5} more)" if len(self.invalid) > 5 else ""
        super().__init__(f"Characters outside the alphabet band: {shown}{more}")


class EmptyKeyError(CipherError):
    """Running-key seed is empty."""

    def __init__(self, message: str = "Bellaso key must not be empty."):
        super().__init__(message)
