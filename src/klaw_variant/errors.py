"""Error types raised by unwrap, expect and match."""

from __future__ import annotations

__all__ = ["MatchError", "UnwrapError", "VariantError"]


class VariantError(Exception):
    """Base class for every error raised by klaw-variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnwrapError(VariantError):
    """A value was extracted from the wrong variant.

    Raised by ``unwrap``/``expect`` on ``Nothing`` or ``Err``, and by
    ``unwrap_err``/``expect_err`` on ``Ok``.
    """


class MatchError(VariantError):
    """``match`` was given no arms, or none of its arms matched."""
