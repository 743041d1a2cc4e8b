"""Runtime helpers for the multihash codec"""

from .errors import ErrorCode, MultihashError, error_from_dict

__all__ = [
    "ErrorCode",
    "MultihashError",
    "error_from_dict",
]
