from __future__ import annotations

from .core import (
    FALLBACK_USERNAMES,
    FetchError,
    InitializationError,
    InvalidArgumentError,
    NameFormat,
    RegistryEvent,
    RegistryOptions,
    ReservedUsernames,
    ReservedUsernamesError,
    UnsupportedFormatError,
    UsernameCheck,
    UsernameStats,
    ValidationResult,
    ValidationRules,
    check_bulk,
    normalize_username,
)
from .io import CACHE_TTL_MS, DEFAULT_SOURCES, RemoteSource

__all__ = [
    "ReservedUsernames",
    "RegistryOptions",
    "RegistryEvent",
    "UsernameCheck",
    "UsernameStats",
    "ValidationRules",
    "ValidationResult",
    "NameFormat",
    "RemoteSource",
    "DEFAULT_SOURCES",
    "CACHE_TTL_MS",
    "FALLBACK_USERNAMES",
    "check_bulk",
    "normalize_username",
    "ReservedUsernamesError",
    "InvalidArgumentError",
    "UnsupportedFormatError",
    "FetchError",
    "InitializationError",
]
