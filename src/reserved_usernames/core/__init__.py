from __future__ import annotations

from .bulk import check_bulk
from .errors import (
    FetchError,
    InitializationError,
    InvalidArgumentError,
    ReservedUsernamesError,
    UnsupportedFormatError,
)
from .events import EventHub, RegistryEvent
from .fallback import FALLBACK_USERNAMES
from .formats import NameFormat, decode_names, encode_names
from .normalize import normalize_username
from .options import RegistryOptions, default_cache_file
from .registry import ReservedUsernames, UsernameCheck
from .stats import UsernameStats, compute_stats
from .suggest import generate_alternatives
from .validation import ValidationResult, ValidationRules, validate_username

__all__ = [
    "ReservedUsernames",
    "UsernameCheck",
    "RegistryOptions",
    "default_cache_file",
    "RegistryEvent",
    "EventHub",
    "NameFormat",
    "encode_names",
    "decode_names",
    "normalize_username",
    "UsernameStats",
    "compute_stats",
    "generate_alternatives",
    "ValidationRules",
    "ValidationResult",
    "validate_username",
    "check_bulk",
    "FALLBACK_USERNAMES",
    "ReservedUsernamesError",
    "InvalidArgumentError",
    "UnsupportedFormatError",
    "FetchError",
    "InitializationError",
]
