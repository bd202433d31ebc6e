from __future__ import annotations


class ReservedUsernamesError(Exception):
    """Base class for every error raised by reserved_usernames."""


class InvalidArgumentError(ReservedUsernamesError, TypeError):
    """The call was structurally wrong (e.g. a string where a list of names is expected)."""


class UnsupportedFormatError(ReservedUsernamesError, ValueError):
    def __init__(self, fmt: object) -> None:
        super().__init__(f"Unsupported format: {fmt}")
        self.format = fmt


class FetchError(ReservedUsernamesError):
    """Remote list could not be fetched or parsed.

    Recoverable: the registry keeps its last-known-good set and reports this via the
    `fetch_error` event instead of raising.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class InitializationError(ReservedUsernamesError, RuntimeError):
    pass
