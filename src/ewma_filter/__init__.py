from .errors import EWMAError, InvalidParameter, NotInitialized
from .ewma import EWMA, calculate_array, initialize, read, reset, update

__all__ = [
    "EWMA",
    "EWMAError",
    "InvalidParameter",
    "NotInitialized",
    "calculate_array",
    "initialize",
    "read",
    "reset",
    "update",
]
