from __future__ import annotations


class EWMAError(ValueError):
    """Base class for estimator errors."""


class InvalidParameter(EWMAError):
    """alpha outside (0, 1], a missing/empty input sequence, or a non-finite sample."""


class NotInitialized(EWMAError):
    """An operation was handed no estimator."""
